"""
handlers/ - Presentation Layer
================================
Telegram bot handlers. The dispatcher receives text messages from Telegram,
delegates record building and delivery to the services, and replies to the user.
No payload shaping lives here.
"""
