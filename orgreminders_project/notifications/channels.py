CHANNEL_EMAIL = "email"
CHANNEL_TEXT = "text"
CHANNELS = (CHANNEL_EMAIL, CHANNEL_TEXT)
