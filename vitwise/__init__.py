"""
Vitwise: turn recognized timetable rows into a weekly class schedule.
"""
