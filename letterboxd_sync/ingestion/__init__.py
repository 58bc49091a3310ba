"""
Pipeline stages for syncing the Letterboxd diary into Notion.
"""
