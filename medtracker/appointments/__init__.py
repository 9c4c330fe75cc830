"""
Appointments module - doctor appointments with upcoming/past views.
"""
