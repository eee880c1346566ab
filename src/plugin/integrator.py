"""Selection of the compile tasks that run the checkers."""

from src.core.exceptions.errors import TaskSelectionError
from src.core.logger.logger import get_logger
from src.host.project import Project
from src.host.tasks import CompileTask
from src.plugin.extension import CheckerFrameworkExtension

logger = get_logger(__name__)


class TaskIntegrator:
    """Attaches the checker agent to the selected compile tasks.

    With no task names in the extension every compile task is selected.
    Otherwise every name must denote an existing compile task; a single
    bad name aborts before any task is modified.
    """

    def __init__(self, project: Project, extension: CheckerFrameworkExtension) -> None:
        self.project = project
        self.extension = extension

    def select_tasks(self) -> list[CompileTask]:
        """Resolve the extension's task names to compile tasks.

        Raises:
            TaskSelectionError: If a named task is missing or does not compile.
        """
        task_names = self.extension.get_task_names()
        if not task_names:
            return self.project.tasks.with_type(CompileTask)

        selected: list[CompileTask] = []
        for name in task_names:
            task = self.project.tasks.get_by_name(name)
            if not isinstance(task, CompileTask):
                raise TaskSelectionError(
                    f"Task '{name}' is not a compile task",
                    task_name=name,
                    reason="wrong_type",
                    details={"kind": task.kind},
                )
            if task not in selected:
                selected.append(task)
        return selected

    def apply(self) -> list[CompileTask]:
        """Attach one agent to every selected task.

        Returns:
            The modified tasks, in selection order.
        """
        tasks = self.select_tasks()
        if not tasks:
            logger.warning(f"No compile tasks in project '{self.project.name}'")

        for task in tasks:
            self.extension.apply_to(task)

        logger.info(
            f"Checker Framework applied to {len(tasks)} task(s): "
            f"{', '.join(t.name for t in tasks) or '-'}"
        )
        return tasks
