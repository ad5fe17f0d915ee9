"""Receipt Points server.

Submit a purchase receipt, earn loyalty points from a fixed rule set, and
look the points up later by receipt ID — over REST or as MCP tools.
"""

__version__ = "0.1.0"
