"""
Notification templates
"""
