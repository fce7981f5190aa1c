"""
Prompt Relay package.

Provides:
- A callable ``generateResponse`` endpoint that relays a prompt to Gemini
- A provider abstraction so the relay can run against stand-in models
"""
