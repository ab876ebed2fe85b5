"""
Gemini-backed collaborators: price oracle, supplier finder, chat assistant.

None of these feed the takeoff engine directly. Fetched prices only become
price overrides on the next estimate; everything else is free text.
"""
