"""
Monitoring Module

Contains the availability checker, the notification channels and the
monitor loop that ties them together.
"""
