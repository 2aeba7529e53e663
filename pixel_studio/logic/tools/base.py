class BaseTool:
    """
    A tool bound to one editor session. Tools mutate the active layer's
    grid and commit their own history snapshot when an action completes.
    """

    def __init__(self, session):
        self.session = session

    def press(self, row, col): pass
    def drag(self, row, col): return False
    def reset(self): pass

    @property
    def paint_color(self):
        """Color written by this tool; None means erase"""
        return self.session.color
