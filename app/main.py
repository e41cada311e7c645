"""
Streamlit Frontend for Account Book

The form UI the household uses to record income and outgo.

DESIGN PRINCIPLES:
1. Validate before sending (the server validates again)
2. One request per user action
3. On error, show the message and keep the previous state
4. Settings stay on this machine until the user presses Save
"""

from datetime import date

import streamlit as st

from account_book.client import (
    LedgerApiClient,
    LedgerApiError,
    SettingsStore,
    build_item,
    summarize,
)
from account_book.config import get_settings
from account_book.models import ClientSettings, LedgerEntry
from account_book.validation import entry_form_errors, settings_errors


st.set_page_config(
    page_title="Account Book",
    page_icon="📒",
    layout="wide",
    initial_sidebar_state="expanded",
)


@st.cache_resource
def get_settings_store() -> SettingsStore:
    return SettingsStore(get_settings().client.settings_path)


def get_client(settings: ClientSettings) -> LedgerApiClient:
    return LedgerApiClient(
        settings.api_url,
        settings.auth_token,
        timeout=get_settings().client.timeout_seconds,
    )


def main():
    """Main application entry point."""
    # Settings are loaded once per session, when the form is first mounted
    if "settings" not in st.session_state:
        st.session_state.settings = get_settings_store().load()
    settings: ClientSettings = st.session_state.settings

    st.sidebar.title(f"📒 {settings.app_name}")
    st.sidebar.markdown("---")

    page = st.sidebar.radio(
        "Navigate to:",
        ["📋 Entries", "➕ Add Entry", "⚙️ Settings"],
        index=0,
    )

    if page != "⚙️ Settings" and not settings.is_connected:
        st.warning("Set the API URL and auth token on the Settings page first.")
        render_settings_page(settings)
        return

    if page == "📋 Entries":
        render_entries_page(settings)
    elif page == "➕ Add Entry":
        render_add_page(settings)
    elif page == "⚙️ Settings":
        render_settings_page(settings)


def render_entry_form(settings: ClientSettings, key: str, entry: LedgerEntry = None):
    """
    Render the entry fields.

    Returns (values, errors); values is None until the form is submitted.
    """
    with st.form(key):
        kind = st.radio(
            "Type",
            ["Outgo", "Income"],
            index=1 if entry is not None and entry.is_income else 0,
            horizontal=True,
        )
        entry_date = st.date_input(
            "Date",
            value=date.fromisoformat(entry.date) if entry is not None else date.today(),
        )
        title = st.text_input("Title", value=entry.title if entry is not None else "")
        categories = settings.income_category_list + settings.outgo_category_list
        if entry is not None and entry.category not in categories:
            categories = [entry.category] + categories
        category = st.selectbox(
            "Category",
            options=categories,
            index=categories.index(entry.category) if entry is not None else 0,
        )
        # No lower bound: stored refunds can be negative
        amount = st.number_input(
            "Amount",
            value=float(entry.amount) if entry is not None else None,
            step=1.0,
        )
        tags = st.multiselect(
            "Tags",
            options=sorted(set(settings.tag_list) | set(entry.tag_list if entry is not None else [])),
            default=entry.tag_list if entry is not None else [],
        )
        memo = st.text_area("Memo", value=entry.memo if entry is not None else "")
        submitted = st.form_submit_button("💾 Save", type="primary")

    if not submitted:
        return None, {}

    date_text = entry_date.isoformat()
    errors = entry_form_errors(date_text, title, category or "", amount)
    if errors:
        return None, errors

    amount_value = int(amount) if float(amount).is_integer() else amount
    item = build_item(
        date_text,
        title,
        category,
        amount_value,
        is_income=kind == "Income",
        tags=tags,
        memo=memo,
        entry_id=entry.id if entry is not None else None,
    )
    return item, {}


def render_add_page(settings: ClientSettings):
    """Render the new entry page."""
    st.title("➕ Add Entry")

    item, errors = render_entry_form(settings, "add_entry")
    for message in errors.values():
        st.error(message)
    if item is None:
        return

    try:
        saved = get_client(settings).add_entry(item)
    except LedgerApiError as e:
        st.error(f"Could not save: {e}")
        return
    st.success(f"Saved {saved.title} on {saved.date}")


def render_entries_page(settings: ClientSettings):
    """Render one month of entries with totals."""
    st.title("📋 Entries")

    picked = st.date_input("Month", value=date.today(), help="Any day of the month")
    year_month = picked.strftime("%Y-%m")
    client = get_client(settings)

    try:
        entries = client.list_entries(year_month)
    except LedgerApiError as e:
        st.error(f"Could not load {year_month}: {e}")
        return

    summary = summarize(entries)
    col1, col2, col3 = st.columns(3)
    col1.metric("Income", f"{summary.income_total:,.0f}")
    col2.metric("Outgo", f"{summary.outgo_total:,.0f}")
    col3.metric("Balance", f"{summary.balance:,.0f}")
    if summary.outgo_by_category:
        st.bar_chart(summary.outgo_by_category)

    st.markdown("---")

    if not entries:
        st.info(f"No entries for {year_month} yet.")
        return

    for entry in sorted(entries, key=lambda e: e.date):
        sign = "+" if entry.is_income else "-"
        with st.expander(f"{entry.date}  {entry.title}  {sign}{entry.amount:,}  ({entry.category})"):
            item, errors = render_entry_form(settings, f"edit_{entry.id}", entry)
            for message in errors.values():
                st.error(message)
            if item is not None:
                try:
                    client.update_entry(year_month, item)
                except LedgerApiError as e:
                    st.error(f"Could not update: {e}")
                else:
                    st.rerun()

            if st.button("🗑️ Delete", key=f"delete_{entry.id}"):
                try:
                    client.delete_entry(year_month, entry.id)
                except LedgerApiError as e:
                    st.error(f"Could not delete: {e}")
                else:
                    st.rerun()


def render_settings_page(settings: ClientSettings):
    """Render the settings form; Save is enabled only when every rule passes."""
    st.title("⚙️ Settings")

    draft = ClientSettings(
        app_name=st.text_input("App name", value=settings.app_name),
        api_url=st.text_input("API URL", value=settings.api_url),
        auth_token=st.text_input("Auth token", value=settings.auth_token, type="password"),
        income_categories=st.text_input(
            "Income categories",
            value=settings.income_categories,
            help="Comma-separated",
        ),
        outgo_categories=st.text_input(
            "Outgo categories",
            value=settings.outgo_categories,
            help="Comma-separated",
        ),
        tags=st.text_input("Tags", value=settings.tags, help="Comma-separated"),
    )

    errors = settings_errors(draft)
    for field, message in errors.items():
        st.error(f"{field.replace('_', ' ').title()}: {message}")

    if st.button("💾 Save Settings", type="primary", disabled=bool(errors)):
        get_settings_store().save(draft)
        st.session_state.settings = draft
        st.success("Settings saved")


if __name__ == "__main__":
    main()
