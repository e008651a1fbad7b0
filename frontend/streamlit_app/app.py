import os
import streamlit as st
from todo_api.core.logging_setup import setup_logging
from todo_ui import TodoClient, TodoItem, TodoListState

API = os.getenv("API_URL", "http://localhost:8000/api/v1")
setup_logging(os.getenv("LOG_LEVEL", "INFO"))

st.set_page_config(page_title="Todo Manager", layout="centered")
st.title("📝 Todo Manager")
st.caption("Stay organized and get things done!")

if "todos" not in st.session_state:
    st.session_state.todos = TodoListState(TodoClient(API))
    st.session_state.todos.reload()
    st.session_state.confirm_delete = None

state: TodoListState = st.session_state.todos

def toggle(todo: TodoItem, key: str) -> None:
    if not state.toggle(todo):
        # put the box back to what the server says
        st.session_state[key] = todo.completed

if state.total_count:
    c1, c2, c3 = st.columns(3)
    c1.metric("Total", state.total_count)
    c2.metric("Completed", state.completed_count)
    c3.metric("Remaining", state.remaining_count)

with st.expander("➕ Add New Todo"):
    with st.form("create", clear_on_submit=True):
        title = st.text_input("Title *", placeholder="Enter todo title")
        description = st.text_area("Description", placeholder="Enter todo description (optional)")
        if st.form_submit_button("Create Todo"):
            if not title:
                st.warning("Title is required.")
            elif state.create(title, description or None):
                st.rerun()

if st.button("Refresh"):
    state.reload()

if state.error:
    st.error(state.error)

if not state.todos:
    st.info("No todos yet. Create your first todo to get started!")

for todo in state.todos:
    with st.container(border=True):
        left, right = st.columns([5, 1])
        with left:
            st.checkbox(
                f"~~{todo.title}~~" if todo.completed else todo.title,
                value=todo.completed,
                key=f"done-{todo.id}-{todo.completed}",
                on_change=toggle,
                args=(todo, f"done-{todo.id}-{todo.completed}"),
            )
            if todo.description:
                st.caption(todo.description)
            st.caption(
                f"Created: {todo.created_at:%Y-%m-%d} · "
                + ("✅ Completed" if todo.completed else "⏳ Pending")
            )
        with right:
            if st.session_state.confirm_delete == todo.id:
                if st.button("Confirm", key=f"confirm-{todo.id}", type="primary"):
                    st.session_state.confirm_delete = None
                    state.delete(todo.id)
                    st.rerun()
                if st.button("Cancel", key=f"cancel-{todo.id}"):
                    st.session_state.confirm_delete = None
                    st.rerun()
            elif st.button("🗑️", key=f"delete-{todo.id}", help=f'Delete "{todo.title}"'):
                st.session_state.confirm_delete = todo.id
                st.rerun()
        with st.expander("✏️ Edit"):
            with st.form(f"edit-{todo.id}"):
                new_title = st.text_input("Title *", value=todo.title, key=f"edit-title-{todo.id}")
                new_description = st.text_area(
                    "Description", value=todo.description or "", key=f"edit-description-{todo.id}"
                )
                if st.form_submit_button("Update Todo"):
                    if not new_title:
                        st.warning("Title is required.")
                    elif state.edit(todo.id, new_title, new_description or None):
                        st.rerun()
                    else:
                        st.error(state.error)
