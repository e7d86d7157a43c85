"""
SYNQ Video CLI - video upload and playback from your terminal.

This CLI talks to the SYNQ video API and covers:
- Creating videos and live streams
- Fetching upload parameters and uploader widgets
- Reading, updating and querying video metadata
- Storing the API key and base URL between runs
"""

__version__ = "1.0.0"
__app_name__ = "SYNQ Video CLI"
