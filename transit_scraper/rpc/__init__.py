from transit_scraper.rpc.client import PLACE_PREVIEW, TRANSIT_LINES, FetchTarget, MapsRpcClient
from transit_scraper.rpc.normalize import XSSI_PREFIX, load_response, parse_response, strip_xssi_prefix

__all__ = [
    "FetchTarget",
    "MapsRpcClient",
    "PLACE_PREVIEW",
    "TRANSIT_LINES",
    "XSSI_PREFIX",
    "load_response",
    "parse_response",
    "strip_xssi_prefix",
]
