"""
Core module - Business logic for ranker

This module contains the core functionality organized by domain:
- models: item, decision and ranked-item records
- ranking: pair selection, Elo scoring and comparison progress
- prompts: decision prompt lookup
- file_loaders: reading ranking sessions from disk
"""
