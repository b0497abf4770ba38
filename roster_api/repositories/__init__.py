"""
Persistence adapters.

The Drive store speaks the Google Drive API; the roster repository maps
schools and rosters onto its folders and files.
"""
