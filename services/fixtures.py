# services/fixtures.py
"""Demo data: five crew members, five construction projects, a few activities.

All timestamps are relative to ``now`` so the demo always looks fresh.
"""
from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from dateutil.relativedelta import relativedelta

from models import (
    Activity, ActivityType, Attachment, AttachmentCategory, AttachmentType,
    Message, Project, ProjectAttachment, Subtask, Task, TaskStatus, User,
)

REFERENCE = AttachmentCategory.reference
WORK = AttachmentCategory.work
DOC = AttachmentType.document
IMG = AttachmentType.image
PENDING = TaskStatus.pending
DONE = TaskStatus.done


DEMO_USER_COUNT = 5


def build_mock_users() -> List[User]:
    return [
        User(name="Alejandro García", phone_number="+34 612-345-678"),
        User(name="María López", phone_number="+34 623-456-789"),
        User(name="Carlos Rodríguez", phone_number="+34 634-567-890"),
        User(name="Sofía Martínez", phone_number="+34 645-678-901"),
        User(name="Miguel Fernández", phone_number="+34 656-789-012"),
    ]


def _sub(title, done, created_by, *assignees) -> Subtask:
    return Subtask(title=title, is_done=done, assignees=list(assignees), created_by=created_by)


def build_mock_projects(users: List[User], now: Optional[datetime] = None) -> List[Project]:
    alejandro, maria, carlos, sofia, miguel = users[:5]
    now = now or datetime.now()
    ago = lambda **kw: now - relativedelta(**kw)

    today = now.date()
    yesterday = today - relativedelta(days=1)
    tomorrow = today + relativedelta(days=1)
    next_week = today + relativedelta(days=5)

    # ---- Renovación Centro ----
    task1_1 = Task(
        title="Pedir materiales para la cocina",
        assignees=[maria], status=PENDING, due_date=today,
        subtasks=[
            _sub("Obtener presupuestos de 3 proveedores", True, carlos, maria),
            _sub("Comparar precios y calidad", True, carlos, maria, carlos),
            _sub("Realizar pedido con el proveedor seleccionado", False, carlos, maria),
            _sub("Confirmar fecha de entrega", False, carlos),
        ],
        attachments=[
            Attachment(type=DOC, category=REFERENCE, file_name="Lista_Materiales_Cocina.pdf",
                       file_size=245_000, uploaded_by=carlos),
            Attachment(type=IMG, category=REFERENCE, file_name="Plano_Cocina.jpg",
                       file_size=1_200_000, uploaded_by=carlos),
        ],
        notes=(
            "Contacto: Leroy Merlin Pro\n"
            "Teléfono: (91) 123-4567\n"
            "Cuenta #: PRO-2847593\n\n"
            "Materiales necesarios:\n"
            "- 24 m² azulejos cerámicos (Toscana Beige)\n"
            "- 3 sacos de cemento cola\n"
            "- Lechada (color Arena)\n"
            "- Crucetas de 6mm\n\n"
            "Dirección de entrega:\n"
            "Calle Mayor 742, Centro"
        ),
        created_by=carlos,
    )
    task1_2 = Task(
        title="Programar inspección eléctrica",
        assignees=[alejandro], status=PENDING, due_date=tomorrow,
        subtasks=[
            _sub("Llamar a la oficina del inspector", True, maria, alejandro),
            _sub("Preparar documentación", False, maria, carlos, alejandro),
            _sub("Despejar acceso al cuadro eléctrico", False, maria),
        ],
        notes=(
            "Inspector Municipal: Roberto Martínez\n"
            "Oficina: (91) 234-5678\n\n"
            "Documentos requeridos:\n"
            "- Permiso #EL-2024-0847\n"
            "- Planos eléctricos (revisados)\n"
            "- Copia licencia de contratista\n\n"
            "El inspector prefiere citas por la mañana (8-10am)"
        ),
        created_by=maria,
        acknowledged_by={alejandro.id},
    )
    task1_3 = Task(title="Completar azulejos del baño", assignees=[carlos], status=DONE,
                   created_by=alejandro)
    task1_4 = Task(
        title="Pintar paredes del salón",
        assignees=[alejandro, carlos], status=PENDING, due_date=tomorrow,
        subtasks=[
            _sub("Comprar materiales de pintura", True, maria, carlos),
            _sub("Preparar paredes y poner cinta", False, maria, alejandro),
            _sub("Aplicar primera capa", False, maria, alejandro, carlos),
            _sub("Aplicar segunda capa", False, maria),
        ],
        notes="Color: Blanco Nube OC-130\nSe necesitan 8 litros",
        created_by=maria,
    )
    task1_5 = Task(
        title="Instalar ventanas nuevas",
        assignees=[alejandro], status=PENDING, due_date=next_week,
        subtasks=[
            _sub("Medir todos los marcos de ventanas", False, carlos, carlos),
            _sub("Pedir ventanas a medida", False, carlos, maria, alejandro),
            _sub("Retirar ventanas antiguas", False, carlos),
            _sub("Instalar ventanas nuevas", False, carlos),
            _sub("Sellar y aislar", False, carlos),
        ],
        attachments=[
            Attachment(type=DOC, category=REFERENCE, file_name="Especificaciones_Ventanas.pdf",
                       file_size=890_000, uploaded_by=carlos),
            Attachment(type=IMG, category=REFERENCE, file_name="Foto_Medidas_Ventanas.jpg",
                       file_size=2_400_000, uploaded_by=carlos),
            Attachment(type=IMG, category=WORK, file_name="Ventana_Antigua_Retirada.jpg",
                       file_size=1_800_000, uploaded_by=alejandro,
                       caption="Primera ventana retirada con éxito"),
        ],
        notes=(
            "Proveedor de ventanas: Cristalería Vista Clara\n"
            "Comercial: Javier Wong\n"
            "Teléfono: (91) 345-6789\n\n"
            "Especificaciones: Doble cristal, Bajo emisivo, Relleno de argón\n"
            "Color del marco: PVC blanco\n\n"
            "Plazo de entrega: 2-3 semanas para medidas personalizadas"
        ),
        created_by=carlos,
        acknowledged_by={alejandro.id},
    )
    task1_6 = Task(
        title="Reparar grifo con fuga en la cocina",
        assignees=[alejandro], status=PENDING, due_date=today,
        notes="El cliente reportó fuga bajo el fregadero. Revisar sifón y conexiones.",
        created_by=maria,
        acknowledged_by={alejandro.id},
    )
    task1_7 = Task(
        title="Instalar tiradores de armarios",
        assignees=[alejandro], status=PENDING,
        subtasks=[
            _sub("Desempaquetar todos los tiradores", True, carlos, alejandro),
            _sub("Marcar posiciones de taladro", True, carlos, alejandro),
            _sub("Instalar tiradores en armarios superiores", False, carlos),
            _sub("Instalar tiradores en armarios inferiores", False, carlos),
            _sub("Instalar tiradores de cajones", False, carlos),
        ],
        created_by=carlos,
        acknowledged_by={alejandro.id},
    )

    # ---- Residencia Sánchez ----
    task2_1 = Task(
        title="Inspección final",
        assignees=[alejandro], status=PENDING, due_date=yesterday,
        subtasks=[
            _sub("Revisar todas las habitaciones", True, sofia, alejandro),
            _sub("Probar enchufes eléctricos", True, sofia),
            _sub("Probar fontanería", False, sofia, alejandro, sofia),
            _sub("Documentar cualquier incidencia", False, sofia, sofia),
        ],
        attachments=[
            Attachment(type=DOC, category=REFERENCE, file_name="Lista_Verificacion_Inspeccion.pdf",
                       file_size=156_000, uploaded_by=sofia),
            Attachment(type=IMG, category=WORK, file_name="Salon_Completado.jpg",
                       file_size=2_100_000, uploaded_by=alejandro,
                       caption="Inspección del salón aprobada"),
            Attachment(type=IMG, category=WORK, file_name="Prueba_Enchufes_Cocina.jpg",
                       file_size=1_900_000, uploaded_by=alejandro,
                       caption="Todos los enchufes de cocina funcionando"),
        ],
        notes=(
            "Propiedad: Residencia Sánchez\n"
            "Dirección: Avenida del Roble 1847, Riverside\n\n"
            "Contacto del cliente: Sr. y Sra. Sánchez\n"
            "Teléfono: (91) 456-7890\n\n"
            "Código de puerta: 4523\n"
            "Código del candado: 1234\n\n"
            "¡Tomar fotos de cualquier incidencia encontrada!"
        ),
        created_by=sofia,
        acknowledged_by={alejandro.id},
    )
    task2_2 = Task(title="Reparar puerta del garaje", assignees=[sofia], status=DONE,
                   created_by=alejandro)
    task2_3 = Task(
        title="Retocar pintura del pasillo",
        assignees=[alejandro], status=PENDING, due_date=today,
        notes="Pequeños roces cerca de la puerta principal. Código de pintura: SW7015 Gris Reposo",
        created_by=sofia,
    )
    task2_4 = Task(
        title="Cambiar pilas de detectores de humo",
        assignees=[alejandro, sofia], status=PENDING,
        subtasks=[
            _sub("Revisar detectores del piso superior", False, sofia, alejandro),
            _sub("Revisar detectores del piso inferior", False, sofia, sofia),
            _sub("Probar todas las alarmas", False, sofia),
        ],
        created_by=sofia,
        acknowledged_by={alejandro.id, sofia.id},
    )

    # ---- Edificio de Oficinas - Fase 2 ----
    task3_1 = Task(
        title="Revisar planos",
        assignees=[miguel], status=PENDING, due_date=today,
        subtasks=[
            _sub("Revisar planos estructurales", True, alejandro, miguel),
            _sub("Verificar distribución eléctrica", False, alejandro, alejandro, miguel),
            _sub("Verificar rutas de fontanería", False, alejandro, maria),
        ],
        created_by=alejandro,
    )
    task3_2 = Task(
        title="Pedir unidades de climatización",
        assignees=[maria, alejandro], status=PENDING, due_date=next_week,
        notes=(
            "Proveedor: Sistemas de Climatización\n"
            "Contacto: Tomás Ruiz\n"
            "Teléfono: (91) 567-8901\n"
            "Email: tomas@climatizacion.com\n\n"
            "Presupuesto #: CCS-2024-1847\n"
            "2x Unidades Carrier 5 toneladas\n"
            "Total: 12.450€ (incluye instalación)\n\n"
            "Requiere 50% de depósito para pedir"
        ),
        created_by=miguel,
        acknowledged_by={maria.id},
    )
    task3_3 = Task(
        title="Coordinar con inspector municipal",
        assignees=[alejandro], status=PENDING,
        notes=(
            "Departamento de Urbanismo: (91) 678-9012\n"
            "Permiso #: BLD-2024-0293\n\n"
            "Inspecciones necesarias:\n"
            "1. Cimentación (APROBADA)\n"
            "2. Estructura (APROBADA)\n"
            "3. Preinstalación eléctrica (PROGRAMADA)\n"
            "4. Preinstalación de fontanería (PENDIENTE)\n"
            "5. Inspección final\n\n"
            "Inspector asignado: Carlos Méndez"
        ),
        created_by=maria,
    )
    task3_4 = Task(title="Completar trabajos de cimentación", assignees=[miguel], status=DONE,
                   created_by=alejandro)
    task3_5 = Task(title="Instalar preinstalación de fontanería", assignees=[alejandro],
                   status=PENDING, due_date=tomorrow, created_by=miguel)
    task3_6 = Task(
        title="Programar vertido de hormigón",
        assignees=[alejandro], status=PENDING, due_date=next_week,
        notes="Se necesitan 12 metros cúbicos. Coordinar con camión bomba.",
        created_by=miguel,
        acknowledged_by={alejandro.id},
    )
    task3_7 = Task(
        title="Pedir cuadros eléctricos",
        assignees=[alejandro, maria], status=PENDING, due_date=today,
        subtasks=[
            _sub("Obtener presupuesto de ElectroPro", True, miguel, maria),
            _sub("Confirmar especificaciones con ingeniero", False, miguel, alejandro),
            _sub("Realizar pedido", False, miguel),
        ],
        created_by=miguel,
    )
    task3_8 = Task(
        title="Actualizar cronograma del proyecto",
        assignees=[alejandro], status=PENDING,
        notes="El cliente quiere el calendario revisado antes del viernes",
        created_by=maria,
    )

    # ---- Mantenimiento de Equipos ----
    task4_1 = Task(title="Revisar excavadora", assignees=[carlos], status=DONE, created_by=alejandro)
    task4_2 = Task(title="Cambiar brocas de taladro", assignees=[miguel], status=DONE,
                   created_by=alejandro)
    task4_3 = Task(
        title="Inspeccionar arneses de seguridad",
        assignees=[alejandro], status=PENDING, due_date=tomorrow,
        notes="Inspección anual vencida. Revisar los 8 arneses.",
        created_by=carlos,
        acknowledged_by={alejandro.id},
    )
    task4_4 = Task(
        title="Pedir cuchillas de repuesto",
        assignees=[alejandro, miguel], status=PENDING,
        subtasks=[
            _sub("Revisar inventario", True, carlos, miguel),
            _sub("Obtener presupuestos", False, carlos, alejandro),
            _sub("Enviar orden de compra", False, carlos),
        ],
        created_by=carlos,
    )

    # ---- Cliente: Corporación ABC ----
    task5_1 = Task(title="Enviar factura", assignees=[alejandro], status=PENDING,
                   due_date=yesterday, created_by=sofia, acknowledged_by={alejandro.id})
    task5_2 = Task(title="Programar reunión de seguimiento", assignees=[sofia], status=PENDING,
                   due_date=tomorrow, created_by=alejandro)
    task5_3 = Task(
        title="Preparar documentos de cierre del proyecto",
        assignees=[alejandro], status=PENDING, due_date=next_week,
        subtasks=[
            _sub("Recopilar garantías", False, sofia, alejandro),
            _sub("Reunir planos finales", False, sofia),
            _sub("Escribir resumen del proyecto", False, sofia, sofia),
        ],
        created_by=sofia,
        acknowledged_by={alejandro.id},
    )
    task5_4 = Task(
        title="Revisar lista de repasos final",
        assignees=[alejandro], status=PENDING, due_date=today,
        notes="Quedan 12 puntos pendientes. Visita del cliente a las 14:00.",
        created_by=sofia,
    )

    def _pa(type_, file_name, size, by, uploaded_at, task=None):
        return ProjectAttachment(type=type_, file_name=file_name, file_size=size, uploaded_by=by,
                                 uploaded_at=uploaded_at, linked_task_id=task.id if task else None)

    return [
        Project(
            name="Renovación Centro",
            members=[alejandro, maria, carlos],
            tasks=[task1_1, task1_2, task1_3, task1_4, task1_5, task1_6, task1_7],
            messages=[
                Message(content="Empecemos a pedir los materiales de cocina esta semana",
                        sender=alejandro, timestamp=ago(hours=5), is_from_current_user=True),
                Message(content="Hoy conseguiré los presupuestos de los proveedores",
                        sender=maria, timestamp=ago(hours=4)),
                Message(content="¿Puedes revisar las medidas?",
                        sender=maria, timestamp=ago(minutes=30)),
            ],
            attachments=[
                _pa(DOC, "Presupuesto_Materiales_Cocina.pdf", 245_000, maria, ago(days=3), task1_1),
                _pa(DOC, "Comparativa_Proveedores.xlsx", 128_000, maria, ago(days=2), task1_1),
                _pa(IMG, "Medidas_Cocina.jpg", 3_200_000, carlos, ago(days=1), task1_1),
                _pa(DOC, "Permiso_Electrico.pdf", 89_000, alejandro, ago(hours=5), task1_2),
                _pa(IMG, "Azulejos_Baño_Completado.jpg", 2_800_000, carlos, ago(days=4), task1_3),
                _pa(DOC, "Especificaciones_Ventanas.pdf", 156_000, alejandro, ago(hours=2), task1_5),
            ],
            unread_task_ids={
                alejandro.id: {task1_1.id, task1_3.id},
                maria.id: {task1_2.id},
                carlos.id: {task1_1.id, task1_2.id},
            },
            last_activity=now,
            last_activity_preview="María: ¿Puedes revisar las medidas?",
        ),
        Project(
            name="Residencia Sánchez",
            members=[alejandro, sofia],
            tasks=[task2_1, task2_2, task2_3, task2_4],
            messages=[
                Message(content="Inspección final programada para mañana",
                        sender=alejandro, timestamp=ago(hours=3), is_from_current_user=True),
                Message(content="Prepararé la lista de verificación",
                        sender=sofia, timestamp=ago(hours=2)),
            ],
            attachments=[
                _pa(DOC, "Lista_Verificacion_Inspeccion.pdf", 67_000, sofia, ago(days=1), task2_1),
                _pa(IMG, "Problema_Fontaneria.jpg", 1_950_000, alejandro, ago(hours=3), task2_1),
                _pa(IMG, "Puerta_Garaje_Reparada.jpg", 2_100_000, sofia, ago(days=2), task2_2),
            ],
            last_activity=ago(hours=2),
            last_activity_preview="Completado: Reparar puerta del garaje",
        ),
        Project(
            name="Edificio de Oficinas - Fase 2",
            members=[alejandro, maria, miguel],
            tasks=[task3_1, task3_2, task3_3, task3_4, task3_5, task3_6, task3_7, task3_8],
            messages=[
                Message(content="Las unidades de climatización deben pedirse antes del viernes",
                        sender=miguel, timestamp=ago(days=1)),
                Message(content="Entendido, coordinaré con el proveedor",
                        sender=alejandro, timestamp=ago(hours=6), is_from_current_user=True),
                Message(content="Reunión de revisión de planos mañana a las 10am",
                        sender=maria, timestamp=ago(minutes=45)),
            ],
            attachments=[
                _pa(DOC, "Planos_Fase2_v3.pdf", 4_500_000, miguel, ago(days=5), task3_1),
                _pa(DOC, "Presupuesto_Climatizacion.pdf", 312_000, maria, ago(days=2), task3_2),
                _pa(DOC, "Permiso_Municipal_BLD-2024-0293.pdf", 178_000, alejandro, ago(days=7), task3_3),
                _pa(IMG, "Inspeccion_Cimentacion_Aprobada.jpg", 2_400_000, miguel, ago(days=10), task3_4),
                _pa(DOC, "Distribucion_Fontaneria.pdf", 890_000, alejandro, ago(hours=6), task3_5),
            ],
            unread_task_ids={
                alejandro.id: {task3_1.id, task3_2.id, task3_4.id, task3_5.id},
                maria.id: {task3_1.id, task3_3.id, task3_4.id},
                miguel.id: {task3_2.id, task3_3.id, task3_5.id},
            },
            last_activity=ago(minutes=30),
            last_activity_preview="Nueva tarea: Instalar preinstalación de fontanería",
        ),
        Project(
            name="Mantenimiento de Equipos",
            members=[alejandro, carlos, miguel],
            tasks=[task4_1, task4_2, task4_3, task4_4],
            last_activity=ago(days=1),
            last_activity_preview="Completado: Cambiar brocas de taladro",
        ),
        Project(
            name="Cliente: Corporación ABC",
            members=[alejandro, sofia],
            tasks=[task5_1, task5_2, task5_3, task5_4],
            attachments=[
                _pa(DOC, "Factura_ABC-2024-0158.pdf", 145_000, alejandro, ago(days=1), task5_1),
                _pa(DOC, "Resumen_Proyecto.docx", 234_000, sofia, ago(hours=8)),
            ],
            unread_task_ids={alejandro.id: {task5_2.id}},
            last_activity=ago(hours=5),
            last_activity_preview="Sofía: La factura está lista para revisión",
        ),
    ]


def build_mock_activities(users: List[User], projects: List[Project],
                          now: Optional[datetime] = None) -> List[Activity]:
    """Newest first. Needs at least two projects; returns [] otherwise."""
    if len(projects) < 2:
        return []
    maria, carlos, sofia = users[1], users[2], users[3]
    project1, project2 = projects[0], projects[1]
    now = now or datetime.now()

    first_done = next((t for t in project1.tasks if t.is_done), None)
    return [
        Activity.record(ActivityType.message_sent, maria, project1,
                        message_preview="¿Puedes revisar las medidas?",
                        timestamp=now - relativedelta(minutes=5)),
        Activity.record(ActivityType.task_completed, carlos, project1, task=first_done,
                        timestamp=now - relativedelta(minutes=30)),
        Activity.record(ActivityType.task_assigned, sofia, project2,
                        task=project2.tasks[0] if project2.tasks else None,
                        timestamp=now - relativedelta(hours=1)),
        Activity.record(ActivityType.task_created, maria, project1,
                        task=project1.tasks[0] if project1.tasks else None,
                        timestamp=now - relativedelta(hours=2)),
        Activity.record(ActivityType.message_sent, carlos, project1,
                        message_preview="Terminaré los azulejos mañana",
                        timestamp=now - relativedelta(days=1)),
    ]
