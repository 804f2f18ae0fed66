"""REST client and client-side board state for the taskboard API."""

from .api_client import TaskboardClient, TaskboardClientError
from .board_view import BoardView

__all__ = ["TaskboardClient", "TaskboardClientError", "BoardView"]
