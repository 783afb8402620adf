"""
wangfill - Rendering

Debug previews of filled layers (requires Pillow).
"""
