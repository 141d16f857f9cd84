"""Base class for file format handlers."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List

from propatlas.core.problem import Problem


class FileFormat(ABC):
    """Abstract base class for file format handlers.

    File format handlers are responsible for:
    1. Parsing files in a specific format
    2. Converting parsed content to Problem objects
    3. Writing Problem objects back to files
    """

    def parse_file(self, file_path: Path, **kwargs) -> Problem:
        """Parse a file and return a Problem object.

        Raises:
            FileNotFoundError: If file doesn't exist
            ProblemFormatError: If file content is invalid
        """
        file_path = Path(file_path)
        with open(file_path, 'r') as f:
            problem = self.parse_string(f.read(), **kwargs)
        if problem.name is None:
            problem.name = file_path.stem
        return problem

    @abstractmethod
    def parse_string(self, content: str, **kwargs) -> Problem:
        """Parse a string and return a Problem object.

        Raises:
            ProblemFormatError: If content is invalid
        """
        pass

    def write_file(self, problem: Problem, file_path: Path, **kwargs) -> None:
        """Write a Problem to a file."""
        with open(Path(file_path), 'w') as f:
            f.write(self.format_problem(problem, **kwargs))

    @abstractmethod
    def format_problem(self, problem: Problem, **kwargs) -> str:
        """Format a Problem as a string."""
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this file format."""
        pass

    @property
    @abstractmethod
    def extensions(self) -> List[str]:
        """Return list of file extensions this format handles."""
        pass
