class AppState:
    def __init__(self, max_code_point: int, viewport_height: int = 1, current: int = 0):
        self._max_code_point = max_code_point
        self.current = current
        self.viewport_height = max(1, viewport_height)

        # ---- transient UI status ----
        self.status_msg: str | None = None
        self.last_search: str = ""

    @property
    def max_code_point(self) -> int:
        return self._max_code_point

    def set_status(self, msg: str | None):
        self.status_msg = msg or None

    def clear_status(self):
        self.status_msg = None

    def set_viewport_height(self, rows: int):
        self.viewport_height = max(1, rows)
