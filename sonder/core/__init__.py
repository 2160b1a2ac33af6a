"""
core package
------------
Logging, exceptions, validation and path configuration shared by all
sonder modules.
"""
