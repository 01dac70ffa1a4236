"""Streamlit dashboard entry point."""

from collections.abc import Sequence
from datetime import date
from decimal import Decimal

import streamlit as st

from src.adapters.interface.streamlit.charts import (
    PERIOD_OPTIONS,
    build_chart_rows,
    build_milestone_rows,
    build_net_worth_chart,
    format_currency,
    format_delta,
    format_delta_with_percent,
    get_period_start,
)
from src.application.ports.database import DatabaseEnginePort
from src.application.use_cases.get_accounts import GetAccountsUseCase
from src.application.use_cases.get_chart_data import GetChartDataUseCase
from src.application.use_cases.manage_accounts import (
    AccountChanges,
    CreateAccountUseCase,
    DeleteAccountUseCase,
    UpdateAccountUseCase,
)
from src.application.use_cases.milestones import (
    AddMilestoneUseCase,
    DeleteMilestoneUseCase,
    GetMilestonesUseCase,
)
from src.application.use_cases.record_balance import (
    DeleteBalanceUseCase,
    GetBalanceHistoryUseCase,
    RecordBalanceUseCase,
)
from src.domain.constants import ACCOUNT_TYPE_LABELS, ACCOUNT_TYPES
from src.domain.errors import AccountNotFoundError, StorageError
from src.domain.models import (
    AccountWithBalance,
    BalanceEntry,
    ChartDataPoint,
    Milestone,
    NetWorthStats,
)
from src.domain.services import compute_net_worth_stats
from src.domain.services.statistics import change_percent
from src.infrastructure.container import (
    build_accounts_repository,
    build_balances_repository,
    build_database_adapter,
    build_milestones_repository,
    build_settings,
)
from src.infrastructure.logging.logger import get_usage_logger
from src.infrastructure.schema import apply_migrations


@st.cache_resource(show_spinner=False)
def _get_db_adapter() -> DatabaseEnginePort:
    """Return the shared database adapter with an up-to-date schema."""
    adapter = build_database_adapter()
    apply_migrations(adapter)
    return adapter


def _fetch_chart_data(
    from_date: date,
    to_date: date,
) -> list[ChartDataPoint]:
    """Reconstruct the net worth series for the selected range."""
    repository = build_balances_repository(_get_db_adapter())
    return GetChartDataUseCase(repository).execute(from_date, to_date)


def _fetch_milestones(from_date: date, to_date: date) -> list[Milestone]:
    """Return milestones inside the selected range."""
    repository = build_milestones_repository(_get_db_adapter())
    return GetMilestonesUseCase(repository).execute(from_date, to_date)


def _fetch_accounts() -> list[AccountWithBalance]:
    """Return active accounts with their latest balance."""
    repository = build_accounts_repository(_get_db_adapter())
    return GetAccountsUseCase(repository).execute()


def _fetch_balance_history(account_id: str) -> list[BalanceEntry]:
    """Return every balance entry of one account, newest first."""
    repository = build_balances_repository(_get_db_adapter())
    return GetBalanceHistoryUseCase(repository).execute(account_id)


def _render_stats(
    stats: NetWorthStats,
    series: Sequence[ChartDataPoint],
    currency_code: str,
) -> None:
    """Render the summary cards."""
    current = series[-1].net_worth if series else Decimal("0")
    net_worth_col, ytd_col, year_col, high_col, avg_col = st.columns(5)
    net_worth_col.metric(
        "Net Worth",
        format_currency(current, currency_code),
    )
    ytd_col.metric(
        "YTD Change",
        format_delta(stats.ytd_change, currency_code),
        f"{stats.ytd_change_percent}%",
    )
    year_col.metric(
        "1Y Return",
        format_delta(stats.one_year_return, currency_code),
        f"{stats.one_year_return_percent}%",
    )
    high_col.metric(
        "All-Time High",
        format_currency(stats.all_time_high, currency_code),
    )
    high_col.caption(f"Reached on {stats.all_time_high_date.isoformat()}")
    avg_col.metric(
        "Avg. Change",
        format_delta(stats.monthly_avg_change, currency_code),
    )


def _render_chart(
    series: Sequence[ChartDataPoint],
    milestones: Sequence[Milestone],
    currency_code: str,
) -> None:
    """Render the net worth chart for the selected range."""
    st.subheader("Net Worth Over Time")
    if not series:
        st.info("No balances recorded in this period.")
        return
    first, last = series[0], series[-1]
    change = last.net_worth - first.net_worth
    st.caption(
        "Change over period: "
        + format_delta_with_percent(
            change,
            change_percent(change, first.net_worth),
            currency_code,
        )
    )
    chart = build_net_worth_chart(
        build_chart_rows(series),
        build_milestone_rows(milestones),
    )
    st.altair_chart(chart, width="stretch")


def _render_accounts(
    accounts: Sequence[AccountWithBalance],
    currency_code: str,
) -> None:
    """Render the accounts table."""
    st.subheader("Accounts")
    data = [
        {
            "Name": item.account.name,
            "Type": ACCOUNT_TYPE_LABELS[item.account.account_type],
            "Category": item.account.category.title(),
            "Institution": item.account.institution or "-",
            "Balance": format_currency(
                item.current_balance,
                item.account.currency or currency_code,
            ),
            "As of": (
                item.balance_date.isoformat() if item.balance_date else "-"
            ),
        }
        for item in accounts
    ]
    st.dataframe(data, width="stretch", hide_index=True)


def _render_create_account_form(currency_code: str) -> None:
    """Render the form creating a new account."""
    with st.form("create_account", clear_on_submit=True):
        st.subheader("Add Account")
        name = st.text_input("Name")
        account_type = st.selectbox(
            "Type",
            options=list(ACCOUNT_TYPES),
            format_func=lambda value: ACCOUNT_TYPE_LABELS[value],
        )
        institution = st.text_input("Institution")
        description = st.text_input("Description")
        currency = st.text_input("Currency", value=currency_code)
        submitted = st.form_submit_button("Create account")
    if not submitted:
        return
    repository = build_accounts_repository(_get_db_adapter())
    try:
        account = CreateAccountUseCase(repository).execute(
            name=name,
            account_type=account_type,
            institution=institution,
            description=description,
            currency=currency,
        )
    except (ValueError, StorageError) as exc:
        st.error(str(exc))
        return
    st.success(f"Created {account.name}.")


def _render_record_balance_form(
    accounts: Sequence[AccountWithBalance],
) -> None:
    """Render the form recording a balance snapshot."""
    if not accounts:
        return
    names = {item.account.id: item.account.name for item in accounts}
    with st.form("record_balance", clear_on_submit=True):
        st.subheader("Record Balance")
        account_id = st.selectbox(
            "Account",
            options=list(names),
            format_func=lambda value: names[value],
        )
        entry_date = st.date_input("Date", value=date.today())
        balance = st.number_input("Balance", step=100.0, format="%.2f")
        notes = st.text_input("Notes")
        submitted = st.form_submit_button("Save balance")
    if not submitted:
        return
    adapter = _get_db_adapter()
    use_case = RecordBalanceUseCase(
        build_accounts_repository(adapter),
        build_balances_repository(adapter),
    )
    try:
        use_case.execute(account_id, entry_date, str(balance), notes)
    except (AccountNotFoundError, ValueError, StorageError) as exc:
        st.error(str(exc))
        return
    st.success(f"Saved balance for {names[account_id]}.")


def _render_manage_account(item: AccountWithBalance) -> None:
    """Render the edit form and delete control for one account.

    Clearing the active flag hides the account from every list and from
    the net worth series; its balances stay stored.
    """
    account = item.account
    with st.form(f"edit_account_{account.id}"):
        st.subheader(f"Edit {account.name}")
        name = st.text_input("Name", value=account.name)
        institution = st.text_input(
            "Institution",
            value=account.institution or "",
        )
        description = st.text_input(
            "Description",
            value=account.description or "",
        )
        currency = st.text_input("Currency", value=account.currency)
        is_active = st.checkbox("Active", value=account.is_active)
        submitted = st.form_submit_button("Save changes")
    if submitted:
        changes = AccountChanges(
            name=name,
            institution=institution,
            description=description,
            currency=currency,
            is_active=is_active,
        )
        repository = build_accounts_repository(_get_db_adapter())
        try:
            updated = UpdateAccountUseCase(repository).execute(
                account.id,
                changes,
            )
        except (AccountNotFoundError, ValueError, StorageError) as exc:
            st.error(str(exc))
            return
        st.success(f"Updated {updated.name}.")
    if st.button("Delete account", key=f"delete_account_{account.id}"):
        repository = build_accounts_repository(_get_db_adapter())
        try:
            DeleteAccountUseCase(repository).execute(account.id)
        except StorageError as exc:
            st.error(str(exc))
            return
        st.rerun()


def _render_balance_history(item: AccountWithBalance) -> None:
    """Render the balance entries of one account with a delete control."""
    account = item.account
    st.subheader(f"{account.name} History")
    entries = _fetch_balance_history(account.id)
    if not entries:
        st.info("No balances recorded for this account.")
        return
    st.dataframe(
        [
            {
                "Date": entry.date.isoformat(),
                "Balance": format_currency(entry.balance, account.currency),
                "Notes": entry.notes or "",
            }
            for entry in entries
        ],
        width="stretch",
        hide_index=True,
    )
    by_id = {entry.id: entry for entry in entries}
    entry_id = st.selectbox(
        "Balance entry",
        options=list(by_id),
        format_func=lambda value: by_id[value].date.isoformat(),
        key=f"balance_entry_{account.id}",
    )
    if st.button("Delete balance", key=f"delete_balance_{account.id}"):
        repository = build_balances_repository(_get_db_adapter())
        try:
            DeleteBalanceUseCase(repository).execute(entry_id)
        except StorageError as exc:
            st.error(str(exc))
            return
        st.rerun()


def _render_milestone_form() -> None:
    """Render the form adding a chart milestone."""
    with st.expander("Add milestone"):
        with st.form("add_milestone", clear_on_submit=True):
            milestone_date = st.date_input("Date", value=date.today())
            label = st.text_input("Label")
            submitted = st.form_submit_button("Add milestone")
    if not submitted:
        return
    repository = build_milestones_repository(_get_db_adapter())
    try:
        AddMilestoneUseCase(repository).execute(milestone_date, label)
    except (ValueError, StorageError) as exc:
        st.error(str(exc))
        return
    st.success("Milestone added.")


def _render_milestone_removal(milestones: Sequence[Milestone]) -> None:
    """Render a delete control for milestones shown on the chart."""
    if not milestones:
        return
    by_id = {milestone.id: milestone for milestone in milestones}
    with st.expander("Remove milestone"):
        milestone_id = st.selectbox(
            "Milestone",
            options=list(by_id),
            format_func=lambda value: (
                f"{by_id[value].date.isoformat()} {by_id[value].label}"
            ),
        )
        clicked = st.button("Delete milestone")
    if not clicked:
        return
    repository = build_milestones_repository(_get_db_adapter())
    try:
        DeleteMilestoneUseCase(repository).execute(milestone_id)
    except StorageError as exc:
        st.error(str(exc))
        return
    st.rerun()


def _render_account_details(accounts: Sequence[AccountWithBalance]) -> None:
    """Render edit and history panels for the selected account."""
    if not accounts:
        return
    by_id = {item.account.id: item for item in accounts}
    account_id = st.selectbox(
        "Manage account",
        options=list(by_id),
        format_func=lambda value: by_id[value].account.name,
    )
    item = by_id[account_id]
    edit_col, history_col = st.columns(2)
    with edit_col:
        _render_manage_account(item)
    with history_col:
        _render_balance_history(item)


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Net Worth Tracker", layout="wide")
    st.title("Net Worth Tracker")

    settings = build_settings()
    currency_code = settings.default_currency
    page = st.sidebar.selectbox("Page", ["Dashboard", "Accounts"])
    get_usage_logger().info(f"Page view: {page}")

    if page == "Dashboard":
        period = st.sidebar.selectbox("Period", list(PERIOD_OPTIONS))
        today = date.today()
        start_date = get_period_start(period, today, settings.history_start)

        full_series = _fetch_chart_data(settings.history_start, today)
        stats = compute_net_worth_stats(full_series, today)
        series = [point for point in full_series if point.date >= start_date]
        milestones = _fetch_milestones(start_date, today)

        _render_stats(stats, full_series, currency_code)
        _render_chart(series, milestones, currency_code)
        _render_milestone_form()
        _render_milestone_removal(milestones)
    else:
        accounts = _fetch_accounts()
        st.caption(f"{len(accounts)} active accounts")
        if accounts:
            _render_accounts(accounts, currency_code)
        else:
            st.warning("No accounts yet. Add one below.")
        left, right = st.columns(2)
        with left:
            _render_create_account_form(currency_code)
        with right:
            _render_record_balance_form(accounts)
        _render_account_details(accounts)


if __name__ == "__main__":  # pragma: no cover
    main()
