"""
weekview: weekly class timetable from pasted tab-separated text.
"""
