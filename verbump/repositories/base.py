class FileRepository:
    """
    Base repository for the files touched by a bump.

    Subclasses store text keyed by a path relative to the workspace root
    and raise FileAccessError when a path cannot be read or written.
    """

    def read(self, path: str) -> str:
        """
        Reads the full text of a file.

        Args:
            path: Path relative to the workspace root

        Returns:
            File content, line endings untouched

        Raises:
            FileAccessError: If the file is missing or unreadable
        """
        raise NotImplementedError

    def write(self, path: str, text: str) -> None:
        """
        Replaces the content of an existing file.

        Args:
            path: Path relative to the workspace root
            text: New content

        Raises:
            FileAccessError: If the file is missing or not writable
        """
        raise NotImplementedError
