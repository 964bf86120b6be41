"""
YouTube Insights tool server.

Exposes tools that fetch YouTube transcripts and channel data and derive
summaries, channel content reports and founder business reports from them.
"""

from yt_insights.config import config

__version__ = config.APP_VERSION
