"""
Core functionality for the YouTube insights tool server.

This package contains the transcript analysis pipeline (segmenting,
summarizing, theme scanning, entity and insight extraction), the YouTube
client and the tools that compose their output into reports.
"""
