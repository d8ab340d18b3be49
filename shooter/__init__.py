"""Shooter Game: a single-screen arcade shooter built on pygame."""
