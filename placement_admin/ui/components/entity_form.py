"""
Schema-driven add/edit form shared by the management screens.

Form values live in ``st.session_state`` under ``pa_<screen>_form_<field>``
keys. Every mutation runs in a widget callback, before the next render, so
the form can be cleared or pre-filled without touching already-rendered
widgets.
"""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Tuple

import streamlit as st

from placement_admin.data.store import EntityCollection, EntitySchema, FormField
from placement_admin.notifications import NotificationCenter
from placement_admin.ui.components.formatting import parse_iso_date

Message = Tuple[str, str]


@dataclass(frozen=True)
class EditorConfig:
    key: str
    add_button: str
    add_title: str
    on_created: Callable[[Any], Message]
    on_deleted: Callable[[Any], Message]
    edit_title: Optional[str] = None
    on_updated: Optional[Callable[[Any], Message]] = None
    submit_label: str = "Add"
    update_label: str = "Update"

    @property
    def editable(self) -> bool:
        return self.on_updated is not None


def field_key(cfg: EditorConfig, name: str) -> str:
    return f"pa_{cfg.key}_form_{name}"


def _open_key(cfg: EditorConfig) -> str:
    return f"pa_{cfg.key}_form_open"


def _editing_key(cfg: EditorConfig) -> str:
    return f"pa_{cfg.key}_editing"


def _to_widget(form_field: FormField, value: Any) -> Any:
    if form_field.kind == "date":
        return parse_iso_date(value)
    return value


def _from_widget(form_field: FormField, value: Any) -> str:
    if form_field.kind == "date":
        return value.isoformat() if isinstance(value, dt.date) else ""
    return "" if value is None else str(value)


def _load_form(cfg: EditorConfig, schema: EntitySchema, values: Dict[str, Any]) -> None:
    for form_field in schema.form_fields:
        st.session_state[field_key(cfg, form_field.name)] = _to_widget(
            form_field, values.get(form_field.name, form_field.default)
        )


def read_form(cfg: EditorConfig, schema: EntitySchema) -> Dict[str, str]:
    return {
        f.name: _from_widget(f, st.session_state.get(field_key(cfg, f.name), _to_widget(f, f.default)))
        for f in schema.form_fields
    }


def is_open(cfg: EditorConfig) -> bool:
    return bool(st.session_state.get(_open_key(cfg), False))


def editing_id(cfg: EditorConfig) -> Optional[str]:
    return st.session_state.get(_editing_key(cfg))


def open_create(cfg: EditorConfig, schema: EntitySchema) -> None:
    _load_form(cfg, schema, schema.empty_form())
    st.session_state[_editing_key(cfg)] = None
    st.session_state[_open_key(cfg)] = True


def open_edit(cfg: EditorConfig, schema: EntitySchema, record: Any) -> None:
    _load_form(cfg, schema, schema.form_from(record))
    st.session_state[_editing_key(cfg)] = record.id
    st.session_state[_open_key(cfg)] = True


def close_form(cfg: EditorConfig, schema: EntitySchema) -> None:
    _load_form(cfg, schema, schema.empty_form())
    st.session_state[_editing_key(cfg)] = None
    st.session_state[_open_key(cfg)] = False


def submit_form(cfg: EditorConfig, collection: EntityCollection, notifier: NotificationCenter) -> None:
    form = read_form(cfg, collection.schema)
    record_id = editing_id(cfg)
    if record_id is not None and cfg.on_updated is not None:
        record = collection.update(record_id, form)
        title, description = cfg.on_updated(record)
    else:
        record = collection.create(form)
        title, description = cfg.on_created(record)
    notifier.push(title, description)
    close_form(cfg, collection.schema)


def delete_record(
    cfg: EditorConfig,
    collection: EntityCollection,
    notifier: NotificationCenter,
    record_id: str,
) -> None:
    removed = collection.delete(record_id)
    if editing_id(cfg) == record_id:
        close_form(cfg, collection.schema)
    title, description = cfg.on_deleted(removed)
    notifier.push(title, description, variant="destructive")


def _render_field(cfg: EditorConfig, form_field: FormField) -> None:
    key = field_key(cfg, form_field.name)
    if key not in st.session_state:
        st.session_state[key] = _to_widget(form_field, form_field.default)
    if form_field.kind == "date":
        st.date_input(form_field.label, key=key, format="YYYY-MM-DD")
    elif form_field.kind == "select":
        st.selectbox(form_field.label, options=list(form_field.options), key=key)
    else:
        st.text_input(form_field.label, key=key, placeholder=form_field.placeholder)


def render_add_button(cfg: EditorConfig, schema: EntitySchema) -> None:
    st.button(
        cfg.add_button,
        key=f"pa_{cfg.key}_add",
        type="primary",
        on_click=open_create,
        args=(cfg, schema),
    )


def render_edit_button(cfg: EditorConfig, schema: EntitySchema, record: Any) -> None:
    st.button(
        "Edit",
        key=f"pa_{cfg.key}_edit_{record.id}",
        on_click=open_edit,
        args=(cfg, schema, record),
    )


def render_delete_button(
    cfg: EditorConfig,
    collection: EntityCollection,
    notifier: NotificationCenter,
    record: Any,
) -> None:
    st.button(
        "Delete",
        key=f"pa_{cfg.key}_delete_{record.id}",
        on_click=delete_record,
        args=(cfg, collection, notifier, record.id),
    )


def render_editor(cfg: EditorConfig, collection: EntityCollection, notifier: NotificationCenter) -> None:
    """Render the add/edit panel when it is open; submit stays disabled until required fields are filled."""
    if not is_open(cfg):
        return
    schema = collection.schema
    editing = editing_id(cfg) is not None and cfg.editable
    with st.container(border=True):
        st.subheader(cfg.edit_title if editing and cfg.edit_title else cfg.add_title)
        for form_field in schema.form_fields:
            _render_field(cfg, form_field)

        ready = collection.can_submit(read_form(cfg, schema))
        cancel_col, submit_col = st.columns(2)
        with cancel_col:
            st.button(
                "Cancel",
                key=f"pa_{cfg.key}_cancel",
                on_click=close_form,
                args=(cfg, schema),
                width="stretch",
            )
        with submit_col:
            st.button(
                cfg.update_label if editing else cfg.submit_label,
                key=f"pa_{cfg.key}_submit",
                type="primary",
                disabled=not ready,
                on_click=submit_form,
                args=(cfg, collection, notifier),
                width="stretch",
            )
