"""
Vitals module - vital signs readings, date ranges and summaries.
"""
