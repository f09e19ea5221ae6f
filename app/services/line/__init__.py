"""LINE Messaging API clients."""
