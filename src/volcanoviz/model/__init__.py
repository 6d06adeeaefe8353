"""
The MODEL layer contains pure data structures and mapping logic.
It has NO knowledge of the GUI (Qt).
It deals with loading records, classifying them and mapping them to pixels.
"""
