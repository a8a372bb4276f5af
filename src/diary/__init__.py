"""Diary - date-keyed entries in a single TSV file."""
