"""Google Maps transit RPC scraper: fetch raw responses and extract stop sequences and bus timetables."""
