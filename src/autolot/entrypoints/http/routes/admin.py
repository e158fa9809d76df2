from fastapi import APIRouter, Depends

from autolot.entrypoints.http.boundary import operation_boundary
from autolot.entrypoints.http.dependencies import (
    RequestTransaction,
    get_admin_test_drives_use_case,
    get_admin_use_case,
    get_credential,
    get_dashboard_data_use_case,
    get_transaction,
    get_update_test_drive_status_use_case,
)
from autolot.entrypoints.http.dtos.admin import (
    AdminStatusDTO,
    AdminTestDriveDTO,
    AdminTestDrivesQueryDTO,
    DashboardResponseDTO,
    StatusUpdatedDTO,
    UpdateTestDriveStatusDTO,
)
from autolot.entrypoints.http.envelope import Envelope
from autolot.entrypoints.http.error_responses import ERROR_RESPONSES
from autolot.entrypoints.http.mappers.admin_mapper import AdminMapper
from autolot.use_cases.get_admin import GetAdmin, GetAdminRequest
from autolot.use_cases.get_dashboard_data import GetDashboardData, GetDashboardDataRequest
from autolot.use_cases.search_admin_test_drives import (
    SearchAdminTestDrives,
    SearchAdminTestDrivesRequest,
)
from autolot.use_cases.update_test_drive_status import (
    UpdateTestDriveStatus,
    UpdateTestDriveStatusRequest,
)


router = APIRouter(prefix="/admin", tags=["Admin"])

_ADMIN_ERRORS = {code: ERROR_RESPONSES[code] for code in (401, 403, 500)}


@router.get(
    "/me",
    response_model=Envelope[AdminStatusDTO],
    summary="Check admin access",
    description="""
    Never fails for authorization reasons: non-admin and anonymous callers
    get ``authorized=false`` with ``reason="not-admin"``.
    """,
    responses={500: ERROR_RESPONSES[500]},
)
def get_admin(
    credential: str | None = Depends(get_credential),
    use_case: GetAdmin = Depends(get_admin_use_case),
) -> Envelope[AdminStatusDTO]:
    with operation_boundary("Failed to check admin"):
        result = use_case.execute(GetAdminRequest(credential=credential))

    return Envelope[AdminStatusDTO](data=AdminMapper.to_admin_status(result))


@router.get(
    "/test-drives",
    response_model=Envelope[list[AdminTestDriveDTO]],
    summary="List test drive bookings",
    description="""
    Bookings with their car and customer, ordered by booking date (newest
    first) then start time. ``search`` matches car make/model or customer
    name/email; ``status`` must be a known booking status.
    """,
    responses={**_ADMIN_ERRORS, 422: ERROR_RESPONSES[422]},
)
def get_admin_test_drives(
    query: AdminTestDrivesQueryDTO = Depends(),
    credential: str | None = Depends(get_credential),
    use_case: SearchAdminTestDrives = Depends(get_admin_test_drives_use_case),
) -> Envelope[list[AdminTestDriveDTO]]:
    with operation_boundary("Failed to fetch test drives"):
        result = use_case.execute(
            SearchAdminTestDrivesRequest(
                credential=credential,
                search=query.search,
                status=query.status,
            )
        )

    return Envelope[list[AdminTestDriveDTO]](
        data=[AdminMapper.to_test_drive(booking) for booking in result.bookings]
    )


@router.patch(
    "/test-drives/{booking_id}/status",
    response_model=Envelope[StatusUpdatedDTO],
    summary="Update test drive status",
    description="""
    Sets the booking status to PENDING, CONFIRMED, COMPLETED, CANCELLED or
    NO_SHOW. Any status may replace any other.
    """,
    responses={**_ADMIN_ERRORS, 404: ERROR_RESPONSES[404], 422: ERROR_RESPONSES[422]},
)
def update_test_drive_status(
    booking_id: str,
    body: UpdateTestDriveStatusDTO,
    credential: str | None = Depends(get_credential),
    use_case: UpdateTestDriveStatus = Depends(get_update_test_drive_status_use_case),
    transaction: RequestTransaction = Depends(get_transaction),
) -> Envelope[StatusUpdatedDTO]:
    with operation_boundary("Failed to update test drive status"):
        use_case.execute(
            UpdateTestDriveStatusRequest(
                credential=credential,
                booking_id=booking_id,
                status=body.status,
            )
        )
        transaction.commit()

    return Envelope[StatusUpdatedDTO](data=StatusUpdatedDTO())


@router.get(
    "/dashboard",
    response_model=Envelope[DashboardResponseDTO],
    summary="Dashboard statistics",
    description="""
    Car and test drive counts plus the conversion rate: SOLD cars that had
    a COMPLETED test drive, over the number of COMPLETED test drives, as a
    percentage with 2 decimals.
    """,
    responses=_ADMIN_ERRORS,
)
def get_dashboard_data(
    credential: str | None = Depends(get_credential),
    use_case: GetDashboardData = Depends(get_dashboard_data_use_case),
) -> Envelope[DashboardResponseDTO]:
    with operation_boundary("Failed to fetch dashboard data"):
        stats = use_case.execute(GetDashboardDataRequest(credential=credential))

    return Envelope[DashboardResponseDTO](data=AdminMapper.to_dashboard(stats))
