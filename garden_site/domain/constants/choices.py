"""Allowed values for enumerated entity attributes"""

USER_ROLES = ("admin", "staff")

PORTFOLIO_DIFFICULTIES = ("Easy", "Moderate", "Complex")
PORTFOLIO_STATUSES = ("Published", "Draft")

INQUIRY_STATUSES = ("new", "in-progress", "resolved", "archived")

APPOINTMENT_PRIORITIES = ("Normal", "Urgent")
APPOINTMENT_STATUSES = ("Scheduled", "Completed", "Cancelled", "Rescheduled")

# Placeholder author id sent by the admin UI when no author was picked
PLACEHOLDER_OBJECT_ID = "000000000000000000000000"
