"""
Configuration package for the TestFlight slot monitor.
"""
