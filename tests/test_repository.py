"""
Unit tests for the project/task repository
"""
import pytest

from projecthub.errors import NotFoundError
from projecthub.repository import Repository
from projecthub.utils.ids import parse_timestamp
from projecthub.utils.storage import MemoryStorage
from projecthub.utils.store import StoreAdapter


def _ts(value):
    return parse_timestamp(value)


class TestProjects:
    def test_create_then_get(self, repository):
        created = repository.create_project("T", "D")
        fetched = repository.get_project(created.id)

        assert fetched.title == "T"
        assert fetched.description == "D"
        assert fetched.tasks == []
        assert fetched.created_at == fetched.updated_at
        assert fetched.id.startswith("project_")

    def test_new_project_belongs_to_fallback_user_when_logged_out(self, repository):
        assert repository.create_project("T", "D").user_id == "1"

    def test_new_project_belongs_to_current_user(self, repository, session):
        session.login("demo@example.com", "pw")
        assert repository.create_project("T", "D").user_id == session.current_user.id

    def test_list_keeps_insertion_order(self, repository):
        ids = [repository.create_project(f"P{i}", "d").id for i in range(4)]
        assert [p.id for p in repository.list_projects()] == ids

    def test_mixed_sequence_leaves_only_survivors(self, repository):
        a = repository.create_project("A", "a")
        b = repository.create_project("B", "b")
        c = repository.create_project("C", "c")
        repository.update_project(b.id, title="B2")
        repository.delete_project(a.id)
        repository.update_project(c.id, description="c2")

        projects = repository.list_projects()
        assert [p.id for p in projects] == [b.id, c.id]
        assert len({p.id for p in projects}) == len(projects)
        for p in projects:
            assert _ts(p.updated_at) >= _ts(p.created_at)

    def test_update_merges_and_bumps_updated_at(self, repository):
        created = repository.create_project("T", "D")
        updated = repository.update_project(created.id, title="New", id="hijack", tasks=None)

        assert updated.id == created.id
        assert updated.title == "New"
        assert updated.description == "D"
        assert updated.created_at == created.created_at
        assert _ts(updated.updated_at) > _ts(created.updated_at)

    def test_update_missing_project(self, repository):
        with pytest.raises(NotFoundError):
            repository.update_project("nope", title="x")

    def test_delete_removes_project_and_its_tasks(self, repository):
        project = repository.create_project("T", "D")
        task = repository.create_task(project.id, title="A", due_date="2024-01-01")

        repository.delete_project(project.id)

        with pytest.raises(NotFoundError):
            repository.get_project(project.id)
        with pytest.raises(NotFoundError):
            repository.get_task(task.id)
        with pytest.raises(NotFoundError):
            repository.toggle_task_status(task.id)

    def test_delete_missing_project(self, repository):
        with pytest.raises(NotFoundError):
            repository.delete_project("nope")

    def test_returned_records_are_copies(self, repository):
        created = repository.create_project("T", "D")
        created.title = "changed outside"
        repository.list_projects()[0].tasks.append("junk")

        fetched = repository.get_project(created.id)
        assert fetched.title == "T"
        assert fetched.tasks == []


class TestTasks:
    @pytest.fixture
    def project(self, repository):
        return repository.create_project("Project", "With tasks")

    def test_create_task_defaults(self, repository, project):
        task = repository.create_task(project.id, title="A", due_date="2024-01-01")

        assert task.status == "pending"
        assert task.priority == "medium"
        assert task.project_id == project.id
        assert task.created_at == task.updated_at
        parent = repository.get_project(project.id)
        assert parent.tasks[0].id == task.id
        assert _ts(parent.updated_at) >= _ts(task.created_at)

    def test_create_task_for_missing_project_does_not_write(self, repository, storage):
        writes = storage.writes
        with pytest.raises(NotFoundError):
            repository.create_task("missing", title="A", due_date="2024-01-01")
        assert storage.writes == writes

    def test_tasks_keep_order_and_unique_ids(self, repository, project):
        other = repository.create_project("Other", "x")
        ids = [
            repository.create_task(project.id, title="1").id,
            repository.create_task(other.id, title="2").id,
            repository.create_task(project.id, title="3").id,
        ]
        assert len(set(ids)) == 3
        assert [t.title for t in repository.list_tasks(project.id)] == ["1", "3"]
        assert [t.id for t in repository.list_tasks()] == [ids[0], ids[2], ids[1]]

    def test_toggle_twice_restores_status(self, repository, project):
        task = repository.create_task(project.id, title="A", due_date="2024-01-01")

        first = repository.toggle_task_status(task.id)
        second = repository.toggle_task_status(task.id)

        assert first.status == "completed"
        assert second.status == task.status
        assert _ts(first.updated_at) > _ts(task.updated_at)
        assert _ts(second.updated_at) > _ts(first.updated_at)
        assert second.created_at == task.created_at

    def test_update_task_bumps_parent(self, repository, project):
        task = repository.create_task(project.id, title="A", priority="low")
        before = repository.get_project(project.id).updated_at

        updated = repository.update_task(task.id, priority="high", project_id="elsewhere")

        assert updated.priority == "high"
        assert updated.project_id == project.id
        assert repository.get_project(project.id).updated_at == updated.updated_at
        assert _ts(updated.updated_at) > _ts(before)

    def test_update_missing_task(self, repository):
        with pytest.raises(NotFoundError):
            repository.update_task("nope", title="x")

    def test_delete_task(self, repository, project):
        keep = repository.create_task(project.id, title="keep")
        drop = repository.create_task(project.id, title="drop")

        repository.delete_task(drop.id)

        assert [t.id for t in repository.list_tasks(project.id)] == [keep.id]
        with pytest.raises(NotFoundError):
            repository.delete_task(drop.id)


class TestLoading:
    def test_empty_storage_is_seeded(self, seeded_repository):
        projects = seeded_repository.list_projects()
        assert [p.title for p in projects] == [
            "E-commerce Website",
            "Mobile App Development",
            "Blog Platform",
        ]
        assert seeded_repository.get_task("5").project_id == "2"

    def test_seed_can_be_disabled(self, repository):
        assert repository.list_projects() == []

    def test_state_survives_a_new_repository(self, store, session, repository):
        project = repository.create_project("Kept", "on disk")
        repository.create_task(project.id, title="Task")

        reloaded = Repository(store, session, seed=True)

        assert [p.title for p in reloaded.list_projects()] == ["Kept"]
        assert reloaded.list_tasks(project.id)[0].title == "Task"

    def test_corrupt_record_falls_back_to_seed(self, storage, store, session):
        storage.set_item("test_projects", '[{"title": "no id"}]')
        repo = Repository(store, session, seed=True)
        assert len(repo.list_projects()) == 3

    def test_seed_is_not_shared_between_repositories(self, store, session):
        first = Repository(store, session, seed=True)
        first.toggle_task_status("2")

        second = Repository(StoreAdapter(MemoryStorage()), session, seed=True)
        assert second.get_task("2").status == "pending"
