"""Reasoning selection for an LLM-backed research agent pipeline."""
