from __future__ import annotations

import sys
from pathlib import Path

import streamlit as st
from dotenv import load_dotenv

_SRC_ROOT = Path(__file__).resolve().parents[2]
if str(_SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(_SRC_ROOT))

load_dotenv(_SRC_ROOT.parent / ".env", override=False)

from batch_namer.container import build_services
from batch_namer.domain.models import RenameParams, RuleKind
from batch_namer.logging_setup import configure_logging
from batch_namer.services.export_service import ExportBlockedError
from batch_namer.settings import LOG_LEVEL, SQLITE_PATH
from batch_namer.ui_streamlit.helpers import (
    EXT_RULES,
    NAME_RULES,
    PARAMETERLESS_RULES,
    TEXT_RULES,
    build_preview_rows,
    default_params,
    format_new_name,
    rule_title,
    source_from_upload,
)


def _init_state() -> None:
    st.session_state.setdefault("services", None)
    st.session_state.setdefault("pending_rule", None)
    st.session_state.setdefault("uploader_nonce", 0)
    st.session_state.setdefault("reattach_nonce", 0)
    st.session_state.setdefault("prepared_export", None)


def _get_services():
    if st.session_state["services"] is None:
        configure_logging(LOG_LEVEL)
        st.session_state["services"] = build_services(SQLITE_PATH)
    return st.session_state["services"]


def _trigger_rerun() -> None:
    if hasattr(st, "rerun"):
        st.rerun()
    else:
        st.experimental_rerun()


def _after_mutation() -> None:
    st.session_state["prepared_export"] = None
    _trigger_rerun()


def _render_rule_buttons(rename_service) -> None:
    st.sidebar.caption("Name")
    for rule, label in NAME_RULES:
        if st.sidebar.button(label, key=f"rule_{rule.value}", use_container_width=True):
            _select_rule(rename_service, rule)
    st.sidebar.divider()
    st.sidebar.caption("Extension")
    for rule, label in EXT_RULES:
        if st.sidebar.button(label, key=f"rule_{rule.value}", use_container_width=True):
            _select_rule(rename_service, rule)


def _select_rule(rename_service, rule: RuleKind) -> None:
    if rule in PARAMETERLESS_RULES:
        st.session_state["pending_rule"] = None
        rename_service.apply_rule(rule, RenameParams())
        _after_mutation()
    else:
        st.session_state["pending_rule"] = rule.value


def _render_rule_form(rename_service) -> None:
    pending = st.session_state.get("pending_rule")
    if not pending:
        return
    rule = RuleKind(pending)
    defaults = default_params()
    with st.sidebar.form(key=f"form_{rule.value}"):
        st.subheader(rule_title(rule))
        params = RenameParams()
        if rule == RuleKind.REPLACE:
            params.search = st.text_input("Find", value=defaults.search, placeholder="e.g. old_name")
            params.replace = st.text_input("Replace with", value=defaults.replace, placeholder="e.g. new_name")
        elif rule in TEXT_RULES:
            is_ext = rule in {RuleKind.EXT_ADD, RuleKind.EXT_CHANGE}
            params.text = st.text_input(
                "Extension" if is_ext else "Text to add",
                value=defaults.text,
                placeholder="e.g. jpg" if is_ext else "e.g. [draft] ",
            )
        elif rule == RuleKind.PADDING:
            params.digits = int(st.number_input("Minimum digits", min_value=0, value=defaults.digits, step=1))
        elif rule == RuleKind.NUMBERING:
            params.start = int(st.number_input("Start at", value=defaults.start, step=1))
            params.digits = int(st.number_input("Digits", min_value=0, value=defaults.digits, step=1))
        cols = st.columns(2)
        apply_clicked = cols[0].form_submit_button("Apply")
        cancel_clicked = cols[1].form_submit_button("Cancel")

    if apply_clicked:
        st.session_state["pending_rule"] = None
        rename_service.apply_rule(rule, params)
        _after_mutation()
    if cancel_clicked:
        st.session_state["pending_rule"] = None
        _trigger_rerun()


def _render_uploaders(rename_service) -> None:
    uploaded = st.file_uploader(
        "Add files",
        accept_multiple_files=True,
        key=f"uploader_{st.session_state['uploader_nonce']}",
    )
    if uploaded:
        rename_service.add_files([source_from_upload(item) for item in uploaded])
        st.session_state["uploader_nonce"] += 1
        _after_mutation()

    if any(item.source.placeholder for item in rename_service.files):
        st.warning(
            "Files restored from a saved session have no content. "
            "Re-attach the originals to export them."
        )
        reattached = st.file_uploader(
            "Re-attach original files",
            accept_multiple_files=True,
            key=f"reattach_{st.session_state['reattach_nonce']}",
        )
        if reattached:
            count = rename_service.reattach([source_from_upload(item) for item in reattached])
            st.session_state["reattach_nonce"] += 1
            if count:
                _after_mutation()
            else:
                st.info("None of the uploaded files match a restored entry.")


def _render_file_table(rename_service) -> None:
    files = rename_service.files
    if not files:
        st.info("Drop files above or use the uploader to get started.")
        return

    duplicates = rename_service.duplicates()
    rows = build_preview_rows(files, duplicates)
    header = st.columns([1, 5, 5, 3])
    header[0].markdown("**No**")
    header[1].markdown("**Current name**")
    header[2].markdown("**New name**")
    for row, item in zip(rows, files):
        index = int(row["no"]) - 1
        cols = st.columns([1, 5, 5, 1, 1, 1])
        cols[0].write(row["no"])
        current = str(row["current_name"])
        if row["placeholder"]:
            current = f"{current} (no content)"
        cols[1].write(current)
        cols[2].markdown(format_new_name(row))
        if cols[3].button("↑", key=f"up_{item.item_id}", disabled=index == 0):
            if rename_service.move(index, -1):
                _after_mutation()
        if cols[4].button("↓", key=f"down_{item.item_id}", disabled=index == len(files) - 1):
            if rename_service.move(index, 1):
                _after_mutation()
        if cols[5].button("✕", key=f"remove_{item.item_id}"):
            if rename_service.remove(item.item_id):
                _after_mutation()

    stats = st.columns(3)
    stats[0].metric("Files", len(files))
    stats[1].metric("To be renamed", rename_service.changed_count())
    stats[2].metric("Duplicates", len(duplicates))
    if duplicates:
        st.error(f"Duplicate names: {', '.join(sorted(duplicates))}")


def _render_history_controls(rename_service) -> None:
    cols = st.columns(3)
    if cols[0].button("Undo", disabled=not rename_service.can_undo):
        if rename_service.undo():
            _after_mutation()
    if cols[1].button("Redo", disabled=not rename_service.can_redo):
        if rename_service.redo():
            _after_mutation()
    if cols[2].button("Clear list", disabled=not rename_service.files):
        rename_service.clear()
        st.session_state["pending_rule"] = None
        _after_mutation()


def _render_export(services) -> None:
    rename_service = services["rename_service"]
    if st.button("Prepare ZIP", type="primary", disabled=not rename_service.files):
        try:
            prepared = services["export_service"].export(rename_service.files)
            if prepared is None:
                st.info("No files to export.")
            st.session_state["prepared_export"] = prepared
        except ExportBlockedError as exc:
            st.session_state["prepared_export"] = None
            st.error(str(exc))
        except Exception as exc:
            st.session_state["prepared_export"] = None
            st.error(f"Export failed: {exc}")

    prepared = st.session_state.get("prepared_export")
    if prepared is not None:
        if prepared.placeholder_names:
            st.warning(
                f"{len(prepared.placeholder_names)} files have no content and will be empty in the archive."
            )
        st.download_button(
            f"Download {prepared.filename}",
            data=prepared.data,
            file_name=prepared.filename,
            mime="application/zip",
        )


def main() -> None:
    st.set_page_config(page_title="Batch File Renamer", layout="wide")
    st.title("Batch File Renamer")
    _init_state()
    services = _get_services()
    rename_service = services["rename_service"]

    _render_rule_buttons(rename_service)
    _render_rule_form(rename_service)
    _render_uploaders(rename_service)
    _render_file_table(rename_service)
    _render_history_controls(rename_service)
    _render_export(services)


if __name__ == "__main__":
    main()
