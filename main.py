# main.py

#============================================================#
#                           DONEO                            #
#============================================================#
# Version     : V1.0.0                                       #
#------------------------------------------------------------#
# Purpose     : DONEO is a task manager for construction     #
#               crews: projects, tasks, subtasks, messages   #
#               and an activity feed (in-memory demo data)   #
#============================================================#

import streamlit as st
import plotly.express as px
import pandas as pd

import db
from models import TaskStatus
from services import DataService
from utils.logging import configure_logging, get_logger
from utils.progress import compute_project_progress, compute_task_progress
from utils.timeline import activity_df, timeline_df_for_project

def force_rerun():
    fn = getattr(st, "rerun", None) or getattr(st, "experimental_rerun", None)
    if fn:
        fn()

st.set_page_config(page_title="DONEO", layout="wide", initial_sidebar_state="collapsed")

@st.cache_resource
def _init_once():
    configure_logging()
    db.init_db()
    return True

_init_once()
log = get_logger("doneo.main")

def get_service() -> DataService:
    """One DataService per browser session, seeded on first access."""
    if "data_service" not in st.session_state:
        svc = DataService()
        svc.load_projects()
        svc.load_mock_activities()
        st.session_state["data_service"] = svc
    return st.session_state["data_service"]

# ======================  ONBOARDING  ======================
if "show_onboarding" not in st.session_state:
    st.session_state["show_onboarding"] = db.check_first_launch()

svc = get_service()

if st.session_state["show_onboarding"]:
    st.title("Bienvenido a DONEO")
    with st.form("onboarding"):
        p_name = st.text_input("Nombre del proyecto", placeholder="Renovación cocina")
        p_desc = st.text_area("Descripción (opcional)")
        submitted = st.form_submit_button("Empezar")
    if submitted:
        if p_name.strip():
            svc.create_project(p_name, p_desc or None)
        st.session_state["show_onboarding"] = False
        force_rerun()
    st.stop()

# ======================  MAIN TABS  ======================
user = svc.current_user
tab_projects, tab_activity, tab_calls, tab_settings = st.tabs(
    ["Proyectos", "Actividad", "Llamadas", "Ajustes"]
)

with tab_projects:
    projects = svc.projects
    unread = svc.total_unread_count()
    st.caption(f"{user.name} · {unread} tareas sin leer")

    summary = pd.DataFrame([
        {"Proyecto": p.name, "Progreso": compute_project_progress(p)} for p in projects
    ])
    if not summary.empty:
        fig = px.bar(summary, x="Progreso", y="Proyecto", orientation="h", range_x=[0, 100])
        fig.update_yaxes(autorange="reversed")
        st.plotly_chart(fig, use_container_width=True)

    chosen = st.selectbox("Proyecto", options=projects, format_func=lambda p: p.name)
    if chosen:
        st.subheader(chosen.name)
        if chosen.last_activity_preview:
            st.caption(chosen.last_activity_preview)
        st.dataframe(timeline_df_for_project(chosen), use_container_width=True, hide_index=True)

        for t in chosen.tasks:
            c1, c2 = st.columns([5, 1])
            with c1:
                flag = " 🆕" if t.needs_acknowledgment(user.id) else ""
                st.markdown(f"**{t.title}**{flag} · {compute_task_progress(t):.0f}%")
            with c2:
                label = "Reabrir" if t.is_done else "Completar"
                if st.button(label, key=f"toggle_{t.id}"):
                    new_status = TaskStatus.pending if t.is_done else TaskStatus.done
                    svc.set_task_status(chosen.id, t.id, new_status)
                    force_rerun()

        st.markdown("---")
        for m in chosen.messages:
            st.markdown(f"**{m.sender.first_name}**: {m.content}")
        with st.form(f"msg_{chosen.id}", clear_on_submit=True):
            text = st.text_input("Mensaje")
            if st.form_submit_button("Enviar") and text.strip():
                svc.post_message(chosen.id, text)
                force_rerun()

with tab_activity:
    feed = svc.activities_for_current_user
    if not feed:
        st.info("No hay actividad reciente.")
    else:
        st.dataframe(activity_df(feed)[["When", "Description", "Project"]],
                     use_container_width=True, hide_index=True)

with tab_calls:
    st.info("Las llamadas de voz y video estarán disponibles en una actualización futura")

with tab_settings:
    users = svc.mock_users
    picked = st.selectbox("Usuario actual", options=users, index=svc.current_user_index,
                          format_func=lambda u: f"{u.name} ({u.phone_number})")
    if picked.id != user.id:
        svc.switch_user(picked)
        force_rerun()
