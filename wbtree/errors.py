class TreeError(Exception):
    """Base class for errors raised by the tree and the structures built on it"""


class DuplicateItemError(TreeError, ValueError):

    def __init__(self, item):
        self.item = item
        super().__init__(
            f"A node holding the item specified in parameter 'item' (value = '{item}') "
            "already exists in the tree."
        )


class ItemNotFoundError(TreeError, KeyError):

    def __init__(self, item):
        self.item = item
        super().__init__(f"The specified item ('{item}') does not exist in the tree.")

    def __str__(self):
        # KeyError quotes its argument otherwise
        return self.args[0]


class EmptyTreeError(TreeError, LookupError):

    def __init__(self):
        super().__init__("The tree is empty.")


class InvalidOperationError(TreeError, RuntimeError):

    def __init__(self, item, message: str):
        self.item = item
        super().__init__(message)
