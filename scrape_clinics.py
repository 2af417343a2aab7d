#!/usr/bin/env python
"""
Clinic Hours Scraper - CLI

Look up every clinic in a CSV on Google Maps (via SerpAPI) and save
address, phone and opening hours to output.json / output.csv.

Usage:
    python scrape_clinics.py
    python scrape_clinics.py clinics.csv --api-key YOUR_KEY
    python scrape_clinics.py clinics.csv --fresh  # Ignore saved progress

Rerunning after a crash or quota stop resumes from progress.json.
"""

import sys
from clinic_hours.cli import main

if __name__ == "__main__":
    sys.exit(main())
