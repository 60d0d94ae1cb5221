# Version information
VERSION = '1.0.0'
DATE = "10/19/2026"
