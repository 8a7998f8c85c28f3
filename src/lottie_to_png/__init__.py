"""Render Lottie animations to PNG frame sequences."""
