"""
Command line scripts
"""
