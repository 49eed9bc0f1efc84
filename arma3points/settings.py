# arma3points/settings.py
"""
Fixed endpoints and defaults for the GameTracker scraper.

The widget query string must stay byte-for-byte identical to what the live
component endpoint expects, so parameters are kept as an ordered tuple.
"""

STATS_BASE_URL = "https://www.gametracker.com"
WIDGET_BASE_URL = "https://cache.gametracker.com/components/html0/"

# host:port of the Arma 3 server tracked on GameTracker
GAME_SERVER = "arma.badcompanypmc.com:2312"

WIDGET_THEME = (
    ("bgColor", "121212"),
    ("fontColor", "CCCCCC"),
    ("titleBgColor", "242424"),
    ("titleColor", "4EFF05"),
    ("borderColor", "242424"),
    ("linkColor", "4EFF05"),
    ("borderLinkColor", "9C9C9C"),
    ("showMap", "0"),
    ("currentPlayersHeight", "100"),
    ("showCurrPlayers", "1"),
    ("topPlayersHeight", "100"),
    ("showTopPlayers", "0"),
    ("showBlogs", "0"),
    ("width", "270"),
)

REQUEST_TIMEOUT_SECONDS = 15
REFRESH_INTERVAL_SECONDS = 60

HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/120.0.0.0 Safari/537.36"
    ),
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.9",
}
