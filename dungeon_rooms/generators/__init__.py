"""
Room generators: wall/door state for room boundaries and template lookup.
"""
