"""Repository layer: DB access helpers (SQLite).

Keep functions thin and focused, so services avoid SQL strings. Every function
takes the connection it runs on; none of them commit or open handles.
"""
