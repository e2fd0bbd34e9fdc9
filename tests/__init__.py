"""
Test suite for the aasx_package project.
"""
