"""Task registry and the compile task surface."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from src.core.exceptions.errors import BuildGraphError


class Task:
    """Base class for tasks registered on a project."""

    def __init__(self, name: str) -> None:
        self.name = name

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.name!r})"


@dataclass
class CompileOptions:
    """Options passed to the Java compiler.

    Attributes:
        compiler_args: Extra arguments, in order.
        boot_classpath: Boot classpath override, or None to use the default.
        fork: Whether to run the compiler in a separate process.
    """

    compiler_args: list[str] = field(default_factory=list)
    boot_classpath: str | None = None
    fork: bool = False


class CompileTask(Task):
    """A task that compiles sources."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.options = CompileOptions()


class JavaCompile(CompileTask):
    """Compiles Java sources with javac."""


T = TypeVar("T", bound=Task)


class TaskCollection(Generic[T]):
    """A live view over tasks of one type.

    ``all`` applies an action to every matching task present now and to
    every matching task registered afterwards.
    """

    def __init__(self, container: "TaskContainer", task_type: type[T]) -> None:
        self._container = container
        self._task_type = task_type

    def all(self, action: Callable[[T], None]) -> None:
        for task in self:
            action(task)
        self._container._add_listener(self._task_type, action)

    def __iter__(self) -> Iterator[T]:
        return iter([t for t in self._container if isinstance(t, self._task_type)])

    def __len__(self) -> int:
        return len(list(iter(self)))


class TaskContainer:
    """The per-project registry of tasks, in registration order."""

    def __init__(self) -> None:
        self._tasks: dict[str, Task] = {}
        self._listeners: list[tuple[type[Task], Callable]] = []

    def register(self, name: str, task_type: type[T] = JavaCompile) -> T:
        """Register a new task.

        Args:
            name: Task name, unique within the project.
            task_type: Task class to instantiate.

        Returns:
            The new task.

        Raises:
            BuildGraphError: If a task with that name already exists.
        """
        if name in self._tasks:
            raise BuildGraphError(
                f"Cannot add task '{name}' as a task with that name already exists.",
                details={"task": name},
            )
        task = task_type(name)
        self._tasks[name] = task
        for listened_type, action in list(self._listeners):
            if isinstance(task, listened_type):
                action(task)
        return task

    def with_type(self, task_type: type[T]) -> TaskCollection[T]:
        return TaskCollection(self, task_type)

    def get_by_name(self, name: str) -> Task:
        """Look up a task, failing if it does not exist.

        Raises:
            BuildGraphError: If no task has that name.
        """
        if name not in self._tasks:
            raise BuildGraphError(f"Task with name '{name}' not found.", details={"task": name})
        return self._tasks[name]

    def _add_listener(self, task_type: type[Task], action: Callable) -> None:
        self._listeners.append((task_type, action))

    def __iter__(self) -> Iterator[Task]:
        return iter(list(self._tasks.values()))

    def __len__(self) -> int:
        return len(self._tasks)
