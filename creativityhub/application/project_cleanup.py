"""
Project cleanup: manual cascade delete across tables with no enforced FKs.

Children are removed before parents. Every step commits on its own and every
step is attempted even after a failure, so a partial failure leaves as little
orphaned data as possible; the overall outcome is the AND of all steps.
"""
import logging
import uuid
from dataclasses import dataclass, field
from typing import Callable, List

logger = logging.getLogger(__name__)


@dataclass
class CascadeStepResult:
    name: str
    ok: bool


@dataclass
class CascadeReport:
    steps: List[CascadeStepResult] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return all(step.ok for step in self.steps)

    @property
    def failed_steps(self) -> List[str]:
        return [step.name for step in self.steps if not step.ok]

    def run(self, name: str, action: Callable[[], bool]) -> bool:
        ok = bool(action())
        if not ok:
            logger.error("Cleanup step failed: %s", name)
        self.steps.append(CascadeStepResult(name, ok))
        return ok


class ProjectCleanupService:
    """
    Owns the deletion order. ``repos`` is the DatabaseManager (or anything
    exposing the same repository attributes).
    """

    def __init__(self, repos):
        self.repos = repos

    def delete_project_cascade_report(self, project_id: uuid.UUID) -> CascadeReport:
        r = self.repos
        report = CascadeReport()

        report.run("activity_logs", lambda: r.activity_logs.delete_by_project_id(project_id))
        report.run("reminders", lambda: r.reminders.delete_by_project_id(project_id))
        report.run("documents", lambda: r.documents.delete_by_project_id(project_id))
        report.run("notes", lambda: r.notes.delete_by_project_id(project_id))
        report.run("work_logs", lambda: r.work_logs.delete_by_project_id(project_id))
        report.run("expenses", lambda: r.expenses.delete_by_project_id(project_id))
        report.run("expense_categories", lambda: r.expense_categories.delete_by_project_id(project_id))

        # A listing that cannot be read is a failed step, not an empty project
        checklist_ids = r.checklists.fetch_ids_by_project_id(project_id)
        if checklist_ids is None:
            report.run("checklists", lambda: False)
        for cid in checklist_ids or []:
            report.run(
                f"checklist_items:{cid}",
                lambda cid=cid: r.checklist_items.delete_by_checklist_id(cid),
            )
            report.run(f"checklist:{cid}", lambda cid=cid: r.checklists.delete(cid))

        idea_ids = r.ideas.fetch_ids_by_project_id(project_id)
        if idea_ids is None:
            report.run("ideas", lambda: False)
        for iid in idea_ids or []:
            report.run(f"idea_tags:{iid}", lambda iid=iid: r.tags.delete_links_for_idea(iid))
            report.run(f"idea:{iid}", lambda iid=iid: r.ideas.delete(iid))

        report.run("project", lambda: r.projects.delete(project_id))

        if report.ok:
            logger.info("Deleted project %s with all dependent rows", project_id)
        else:
            logger.error(
                "Project %s deleted partially; failed steps: %s",
                project_id,
                ", ".join(report.failed_steps),
            )
        return report

    def delete_project_cascade(self, project_id: uuid.UUID) -> bool:
        return self.delete_project_cascade_report(project_id).ok

    def delete_all_data_report(self) -> CascadeReport:
        """Empty every entity table; the migrations ledger and user settings stay."""
        r = self.repos
        report = CascadeReport()

        report.run("activity_logs", r.activity_logs.delete_all)
        report.run("reminders", r.reminders.delete_all)
        report.run("documents", r.documents.delete_all)
        report.run("notes", r.notes.delete_all)
        report.run("work_logs", r.work_logs.delete_all)
        report.run("expenses", r.expenses.delete_all)
        report.run("expense_categories", r.expense_categories.delete_all)
        report.run("checklist_items", r.checklist_items.delete_all)
        report.run("checklists", r.checklists.delete_all)
        report.run("idea_tags", r.tags.delete_all_links)
        report.run("ideas", r.ideas.delete_all)
        report.run("tags", r.tags.delete_all)
        report.run("projects", r.projects.delete_all)

        if report.ok:
            logger.info("All data deleted")
        else:
            logger.error("Delete all data failed at: %s", ", ".join(report.failed_steps))
        return report

    def delete_all_data(self) -> bool:
        return self.delete_all_data_report().ok
