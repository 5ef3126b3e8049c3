import logging

from django.contrib.auth.hashers import check_password, make_password
from django.db import DEFAULT_DB_ALIAS, DatabaseError, IntegrityError, transaction

from .exceptions import (
    AuthenticationFailed,
    DuplicateEmail,
    GenealogyError,
    InvalidSponsor,
    MemberNotFound,
    StorageFailure,
)
from .mlm.counts import propagate_counts
from .mlm.placement import find_slot
from .models import Member, Side
from .signals import member_joined

logger = logging.getLogger(__name__)


def _as_code(value):
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _announce_join(**kwargs):
    # Runs after commit: receiver errors are logged, never raised
    for receiver, result in member_joined.send_robust(sender=Member, **kwargs):
        if isinstance(result, Exception):
            logger.error("member_joined receiver %r failed", receiver, exc_info=result)


# -------------------------------------------------------------
#  JOIN (lock sponsor -> spill -> insert -> link -> counts)
# -------------------------------------------------------------
def join_member(*, name, email, sponsor_code, position, password, mobile=None,
                using=DEFAULT_DB_ALIAS):
    """
    Attach a new member under ``sponsor_code`` on ``position`` (Left/Right),
    spilling down that leg when the slot is taken. Returns the new
    member_code.

    Everything happens in one transaction holding a row lock on the sponsor.
    Joins naming the same sponsor are serialized; joins naming different
    sponsors are not, even when their spillover walks meet lower down.
    """
    side = Side.parse(position)
    code = _as_code(sponsor_code)
    if code is None:
        raise InvalidSponsor(sponsor_code)

    try:
        with transaction.atomic(using=using):
            members = Member.objects.using(using)

            # Lock sponsor
            sponsor = members.select_for_update().filter(member_code=code).first()
            if sponsor is None:
                raise InvalidSponsor(sponsor_code)

            # Spill Logic
            slot = find_slot(sponsor.member_code, side, using=using)

            if members.filter(email__iexact=email).exists():
                raise DuplicateEmail(email)

            member = members.create(
                name=name,
                email=email,
                mobile=mobile or None,
                password=make_password(password),
                sponsor_id=slot.parent_code,
            )

            members.filter(member_code=slot.parent_code).update(
                **{slot.side.child_field: member}
            )

            propagate_counts(member.member_code, slot.parent_code, using=using)

            transaction.on_commit(
                lambda: _announce_join(
                    member_code=member.member_code,
                    parent_code=slot.parent_code,
                    side=slot.side,
                    sponsor_code=sponsor.member_code,
                ),
                using=using,
            )
    except GenealogyError:
        raise
    except Member.DoesNotExist as exc:
        # A child pointer on the spillover spine names a missing member
        logger.exception("Join failed for sponsor %s: broken spine", sponsor_code)
        raise StorageFailure(str(exc)) from exc
    except IntegrityError as exc:
        # A concurrent join registered the same email after our check
        if Member.objects.using(using).filter(email__iexact=email).exists():
            raise DuplicateEmail(email) from exc
        logger.exception("Join failed for sponsor %s", sponsor_code)
        raise StorageFailure(str(exc)) from exc
    except DatabaseError as exc:
        logger.exception("Join failed for sponsor %s", sponsor_code)
        raise StorageFailure(str(exc)) from exc

    return member.member_code


# -------------------------------------------------------------
#  LOGIN / PROFILE
# -------------------------------------------------------------
def authenticate_member(email, password, using=DEFAULT_DB_ALIAS):
    """Return the member's public record, or raise AuthenticationFailed."""
    member = Member.objects.using(using).filter(email__iexact=email).first()
    if member is None:
        # Hash anyway so unknown emails take as long as wrong passwords
        make_password(password)
        raise AuthenticationFailed()

    if not check_password(password, member.password):
        raise AuthenticationFailed()

    return member.as_public_dict()


def get_profile(member_code, using=DEFAULT_DB_ALIAS):
    code = _as_code(member_code)
    member = None
    if code is not None:
        member = Member.objects.using(using).filter(member_code=code).first()
    if member is None:
        raise MemberNotFound(member_code)
    return member.as_public_dict()
