from datetime import date, timedelta
from uuid import uuid4

import pytest

from models import ActivityType, TaskStatus, User
from services import DataService, ProjectNotFoundError, TaskNotFoundError, UnknownUserError
from services.fixtures import build_mock_users


def test_project_lookup_until_replaced(service):
    p = service.projects[1]
    assert service.project(p.id) is p
    renamed = p.model_copy(update={"name": "Residencia Sánchez (fase 2)"})
    assert service.update_project(renamed) is True
    assert service.project(p.id) is renamed
    assert service.projects[1] is renamed


def test_update_unknown_project_is_ignored(service):
    before = [p.id for p in service.projects]
    stranger = service.projects[0].model_copy(update={"id": uuid4()})
    assert service.update_project(stranger) is False
    assert [p.id for p in service.projects] == before
    assert service.project(stranger.id) is None


def test_require_project_raises(service):
    with pytest.raises(ProjectNotFoundError):
        service.require_project(uuid4())


def test_add_activity_always_goes_first(service, users):
    project = service.projects[0]
    first = service.add_activity(ActivityType.task_created, users[1], project)
    second = service.add_activity(ActivityType.message_sent, users[2], project, message_preview="ok")
    assert service.activities[0] is second
    assert service.activities[1] is first


def test_activities_for_current_user_excludes_own(service, users):
    project = service.projects[0]
    for actor in users:
        service.add_activity(ActivityType.task_created, actor, project)
    for u in users:
        service.switch_user(u)
        feed = service.activities_for_current_user
        assert all(a.actor_id != u.id for a in feed)
        assert len(feed) == len([a for a in service.activities if a.actor_id != u.id])


def test_completed_activity_scenario(service, users):
    assert service.current_user_index == 0
    project = service.projects[0]
    service.add_activity(ActivityType.task_completed, users[2], project)
    first = service.activities_for_current_user[0]
    assert first.type == ActivityType.task_completed
    assert first.description.startswith(users[2].first_name)


def test_seeding_is_idempotent(service):
    projects = [p.id for p in service.projects]
    activities = [a.id for a in service.activities]
    assert service.load_projects() is False
    assert service.load_mock_activities() is False
    assert [p.id for p in service.projects] == projects
    assert [a.id for a in service.activities] == activities
    assert len(projects) == 5 and len(activities) == 5


def test_mock_activities_need_two_projects(now):
    svc = DataService(clock=lambda: now)
    assert svc.load_mock_activities() is False
    svc.create_project("Solo uno")
    assert svc.load_mock_activities() is False
    assert svc.activities == []


def test_switch_user(service, users):
    service.switch_user(users[3])
    assert service.current_user is users[3]
    assert service.current_user_index == 3
    with pytest.raises(UnknownUserError):
        service.switch_user(User(name="Intruso"))
    assert service.current_user is users[3]


def test_create_project_goes_first(service, users, now):
    with pytest.raises(ValueError):
        service.create_project("   ")
    p = service.create_project(" Reforma ático ", "Buhardilla")
    assert service.projects[0] is p
    assert p.name == "Reforma ático"
    assert [m.id for m in p.members] == [users[0].id]
    assert p.last_activity == now
    assert p.last_activity_preview == "Proyecto creado"
    assert len(service.projects) == 6


def test_unread_counts(service):
    first = service.projects[0]
    assert service.unread_count(first.id) == 2
    assert service.total_unread_count() == 7


def test_tasks_needing_acknowledgment(service):
    pending = service.tasks_needing_acknowledgment()
    titles = {t.title for _, t in pending}
    assert "Pintar paredes del salón" in titles
    assert "Coordinar con inspector municipal" in titles
    assert "Programar inspección eléctrica" not in titles
    assert len(pending) == 9


def test_set_task_status_records_activity(service, users, now):
    project = service.projects[0]
    task = project.tasks[0]
    count = len(service.activities)

    done = service.set_task_status(project.id, task.id, TaskStatus.done)
    assert done.is_done
    assert service.project(project.id).task(task.id).is_done
    assert not project.task(task.id).is_done
    assert service.activities[0].type == ActivityType.task_completed
    assert service.activities[0].actor_id == users[0].id
    assert service.project(project.id).last_activity_preview == f"Completado: {task.title}"
    assert service.project(project.id).last_activity == now

    service.set_task_status(project.id, task.id, TaskStatus.done)
    assert len(service.activities) == count + 1

    service.set_task_status(project.id, task.id, TaskStatus.pending, actor=users[1])
    assert service.activities[0].type == ActivityType.task_reopened
    assert service.activities_for_current_user[0].description == f"María reabrió: {task.title}"


def test_set_task_status_unknown_ids(service):
    project = service.projects[0]
    with pytest.raises(TaskNotFoundError):
        service.set_task_status(project.id, uuid4(), TaskStatus.done)
    with pytest.raises(ProjectNotFoundError):
        service.set_task_status(uuid4(), project.tasks[0].id, TaskStatus.done)


def test_create_task(service, users):
    project = service.projects[1]
    task = service.create_task(project.id, "Limpiar obra", creator=users[3],
                               assignees=[users[0]], due_date=date(2025, 3, 14))
    stored = service.project(project.id)
    assert stored.tasks[-1].id == task.id
    assert stored.last_activity_preview == "Nueva tarea: Limpiar obra"
    assert [a.type for a in service.activities[:2]] == [ActivityType.task_assigned,
                                                         ActivityType.task_created]
    assert task.needs_acknowledgment(users[0].id)
    with pytest.raises(ValueError):
        service.create_task(project.id, "")


def test_create_task_without_assignees_records_only_creation(service):
    project = service.projects[1]
    before = len(service.activities)
    service.create_task(project.id, "Revisar presupuesto")
    assert len(service.activities) == before + 1
    assert service.activities[0].type == ActivityType.task_created


def test_post_message(service, users):
    project = service.projects[0]
    msg = service.post_message(project.id, "Llego a las 8", sender=users[1])
    stored = service.project(project.id)
    assert stored.messages[-1] is msg
    assert msg.is_from_current_user is False
    assert stored.last_activity_preview == "María: Llego a las 8"
    assert service.activities_for_current_user[0].description == "María: Llego a las 8"

    own = service.post_message(project.id, "Perfecto")
    assert own.is_from_current_user is True
    assert service.activities[0].actor_id == users[0].id
    assert service.activities_for_current_user[0].description == "María: Llego a las 8"

    with pytest.raises(ValueError):
        service.post_message(project.id, "  ")


def test_activity_timestamps_follow_clock(service, users, now):
    project = service.projects[0]
    service.set_task_status(project.id, project.tasks[0].id, TaskStatus.done)
    assert service.activities[0].timestamp == now
    assert service.project(project.id).last_activity == now

    service.post_message(project.id, "Voy para allá", sender=users[2])
    assert service.activities[0].timestamp == now

    added = service.add_activity(ActivityType.task_created, users[1], project)
    assert added.timestamp == now


def test_newest_added_is_first_regardless_of_timestamp(service, users, now):
    project = service.projects[0]
    later = service.add_activity(ActivityType.task_created, users[1], project,
                                 timestamp=now + timedelta(hours=3))
    earlier = service.add_activity(ActivityType.task_completed, users[2], project,
                                   timestamp=now - timedelta(days=2))
    assert service.activities[0] is earlier
    assert service.activities[1] is later


def test_too_few_users_rejected(now):
    with pytest.raises(ValueError, match="at least 5 users"):
        DataService(users=build_mock_users()[:3], clock=lambda: now)


def test_update_project_rejects_dangling_attachment_link(service):
    original = service.projects[0]
    linked = original.attachments[0].linked_task_id
    without_task = original.model_copy(
        update={"tasks": [t for t in original.tasks if t.id != linked]})
    with pytest.raises(ValueError, match="not part of project"):
        service.update_project(without_task)
    assert service.project(original.id) is original


def test_activities_for_project(service, users):
    first, second = service.projects[0], service.projects[1]
    assert len(service.activities_for_project(first.id)) == 4
    assert len(service.activities_for_project(second.id)) == 1
    service.add_activity(ActivityType.task_created, users[3], second)
    feed = service.activities_for_project(second.id)
    assert len(feed) == 2
    assert all(a.project_id == second.id for a in feed)
