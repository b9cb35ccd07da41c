from abc import ABC, abstractmethod


class FileClassifierPort(ABC):

    @abstractmethod
    def is_code_file(self, path: str) -> bool:
        """True when *path* is source code worth sending to the reviewer."""
        pass
