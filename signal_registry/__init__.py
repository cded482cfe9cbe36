"""
Signal Registry

Nickname directory, private contact books and offer/answer signaling
for peer-to-peer chat clients, backed by DynamoDB and EventBridge.
"""

__version__ = "1.0.0"
