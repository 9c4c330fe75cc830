"""
Reminders module - timed reminders and their notified flag.
"""
