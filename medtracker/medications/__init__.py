"""
Medications module - medication schedule and taken-dose tracking.
"""
