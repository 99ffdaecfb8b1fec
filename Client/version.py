"""
Crowdin Sync Client - Version

Author: Crowdin Sync Project
"""

VERSION = "0.1.0"
