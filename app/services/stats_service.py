from app.crud import student_record_crud
from app.database import RecordStore
from app.schemas.stats_schema import Summary
from app.services.service_helper import money


def get_summary(db: RecordStore) -> Summary:
    """
    The four figures shown above the table: number of students and the
    fee/paid/remaining totals, as raw numbers and formatted for display.
    """
    totals = student_record_crud.aggregate_records(db)
    return Summary(
        **totals.model_dump(),
        total_fee_display=money(totals.total_fee),
        total_paid_display=money(totals.total_paid),
        total_remaining_display=money(totals.total_remaining),
    )
