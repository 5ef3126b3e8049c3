# memberapp/views.py
# ======================================================
# JSON API: join, login, profile, downline (+ Excel export)
# ======================================================
import json
import logging

import openpyxl
from django.http import HttpResponse, JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_GET, require_POST
from openpyxl.styles import Font
from openpyxl.utils import get_column_letter

from . import services
from .exceptions import DuplicateEmail, GenealogyError, InvalidSponsor
from .forms import JoinForm, LoginForm
from .mlm.downline import downline
from .models import Side

logger = logging.getLogger(__name__)

ERROR_STATUS = {
    InvalidSponsor: 400,
    DuplicateEmail: 409,
}

EXPORT_COLUMNS = [
    ("member_code", "Member Code"),
    ("name", "Name"),
    ("email", "Email"),
    ("mobile", "Mobile"),
    ("sponsor_code", "Sponsor"),
    ("left_child", "Left Child"),
    ("right_child", "Right Child"),
    ("left_count", "Left Count"),
    ("right_count", "Right Count"),
    ("created_at", "Joined"),
]


def _payload(request):
    """Request body as a dict: JSON bodies and form posts are both accepted."""
    if request.content_type == "application/json":
        try:
            data = json.loads(request.body or b"{}")
        except ValueError:
            return {}
        return data if isinstance(data, dict) else {}
    return request.POST


def _error(msg, status):
    return JsonResponse({"status": "error", "msg": msg}, status=status)


def _form_error(form):
    if any(form.has_error(field, "required") for field in form.fields):
        return _error("Missing required fields.", status=400)
    return _error("Invalid field values.", status=400)


# -------------------------
# MEMBER JOIN
# -------------------------
@csrf_exempt
@require_POST
def join(request):
    form = JoinForm(_payload(request))
    if not form.is_valid():
        return _form_error(form)

    data = form.cleaned_data
    try:
        member_code = services.join_member(
            name=data["name"],
            email=data["email"],
            mobile=data.get("mobile"),
            sponsor_code=data["sponsor_code"],
            position=data["position"],
            password=data["password"],
        )
    except GenealogyError as exc:
        return _error(exc.msg, status=ERROR_STATUS.get(type(exc), 500))

    return JsonResponse({
        "status": "success",
        "msg": "Member Added Successfully",
        "member_code": member_code,
    })


# -------------------------
# LOGIN
# -------------------------
@csrf_exempt
@require_POST
def member_login(request):
    form = LoginForm(_payload(request))
    if not form.is_valid():
        return _form_error(form)

    try:
        member = services.authenticate_member(
            form.cleaned_data["email"], form.cleaned_data["password"]
        )
    except GenealogyError as exc:
        return _error(exc.msg, status=401)

    return JsonResponse({"status": "success", "member": member})


# -------------------------
# PROFILE
# -------------------------
@require_GET
def profile(request, member_code):
    try:
        member = services.get_profile(member_code)
    except GenealogyError as exc:
        return _error(exc.msg, status=404)
    return JsonResponse(member)


# -------------------------
# LEFT / RIGHT DOWNLINE
# -------------------------
def _downline_response(member_code, side):
    try:
        code = int(member_code)
    except ValueError:
        return JsonResponse([], safe=False)
    return JsonResponse(downline(code, side), safe=False)


@require_GET
def downline_left(request, member_code):
    return _downline_response(member_code, Side.LEFT)


@require_GET
def downline_right(request, member_code):
    return _downline_response(member_code, Side.RIGHT)


# -------------------------
# DOWNLINE EXCEL EXPORT
# -------------------------
@require_GET
def export_downline_excel(request, side, member_code):
    if side.lower() not in ("left", "right"):
        return _error("Invalid side.", status=404)
    side = Side.parse(side)

    try:
        rows = downline(int(member_code), side)
    except ValueError:
        rows = []

    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = f"{side.label} Downline"

    ws.append([title for _, title in EXPORT_COLUMNS])
    for cell in ws[1]:
        cell.font = Font(bold=True)

    for row in rows:
        ws.append([row.get(key) for key, _ in EXPORT_COLUMNS])

    for index, (key, title) in enumerate(EXPORT_COLUMNS, start=1):
        width = max([len(title)] + [len(str(row.get(key) or "")) for row in rows])
        ws.column_dimensions[get_column_letter(index)].width = width + 2

    logger.info("Exported %s %s downline rows for member %s", len(rows), side.label, member_code)

    response = HttpResponse(
        content_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
    )
    response["Content-Disposition"] = (
        f'attachment; filename="downline_{side.value.lower()}_{member_code}.xlsx"'
    )
    wb.save(response)
    return response
