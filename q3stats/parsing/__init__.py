"""
Log Parsing

Modules:
- classifier: Line membership tests and kill extraction
- segmenter: Grouping of lines into game sessions
"""
