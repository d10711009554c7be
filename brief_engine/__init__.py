"""
Brief Engine

Confidence-scored slot extraction that turns chat messages into a LiveBrief.
"""
