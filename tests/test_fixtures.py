from models import ActivityType
from services.fixtures import build_mock_activities, build_mock_projects, build_mock_users


def test_mock_users():
    users = build_mock_users()
    assert [u.first_name for u in users] == ["Alejandro", "María", "Carlos", "Sofía", "Miguel"]
    assert len({u.id for u in users}) == 5


def test_mock_projects(now):
    users = build_mock_users()
    projects = build_mock_projects(users, now)
    assert [p.name for p in projects] == [
        "Renovación Centro",
        "Residencia Sánchez",
        "Edificio de Oficinas - Fase 2",
        "Mantenimiento de Equipos",
        "Cliente: Corporación ABC",
    ]
    assert [len(p.tasks) for p in projects] == [7, 4, 8, 4, 4]
    for p in projects:
        for a in p.attachments:
            assert a.linked_task_id is None or p.linked_task(a) is not None
    assert projects[0].last_activity == now


def test_members_are_shared_references(now):
    users = build_mock_users()
    projects = build_mock_projects(users, now)
    assert projects[0].members[0] is users[0]


def test_mock_activities_newest_first(now):
    users = build_mock_users()
    projects = build_mock_projects(users, now)
    activities = build_mock_activities(users, projects, now)
    assert [a.type for a in activities] == [
        ActivityType.message_sent,
        ActivityType.task_completed,
        ActivityType.task_assigned,
        ActivityType.task_created,
        ActivityType.message_sent,
    ]
    stamps = [a.timestamp for a in activities]
    assert stamps == sorted(stamps, reverse=True)
    assert activities[1].description == "Carlos completó: Completar azulejos del baño"
    assert activities[2].description == "Sofía te asignó: Inspección final"


def test_mock_activities_need_two_projects(now):
    users = build_mock_users()
    projects = build_mock_projects(users, now)
    assert build_mock_activities(users, projects[:1], now) == []
