"""
Tests for the member service and mapper against a SQLite database
"""
import pytest
from sqlalchemy import select, update

from board.database import get_mysql_session
from board.member.dto import Member
from board.member.mapper import MemberMapper
from board.member.models import MemberRow
from board.member.password import BcryptPasswordEncoder, PlainPasswordEncoder, get_password_encoder
from board.member.service import (
    MemberService, Matched, NotFound, Inserted, Rejected, join_address,
)


async def fetch_row(email):
    async with get_mysql_session() as session:
        result = await session.execute(select(MemberRow).where(MemberRow.member_email == email))
        return result.scalar_one_or_none()


@pytest.mark.asyncio
async def test_signup_inserts_member(database, sam):
    result = await MemberService(PlainPasswordEncoder()).signup(sam, sam.address)

    assert result == Inserted(1)
    row = await fetch_row("a@b.com")
    assert row.member_nickname == "Sam"
    assert row.member_address == "04540^^^서울시 중구 남대문로 120^^^2층"
    assert row.member_del_fl == "N"
    assert row.authority == 1


@pytest.mark.asyncio
async def test_signup_duplicate_email_is_rejected(database, sam):
    service = MemberService(PlainPasswordEncoder())
    await service.signup(sam)

    result = await service.signup(sam.model_copy(update={"nickname": "Other"}))

    assert isinstance(result, Rejected)


@pytest.mark.asyncio
async def test_mapper_signup_returns_zero_on_duplicate(database, sam):
    async with get_mysql_session() as session:
        assert await MemberMapper(session).signup(sam, None) == 1
    async with get_mysql_session() as session:
        assert await MemberMapper(session).signup(sam, None) == 0


@pytest.mark.asyncio
async def test_blank_address_is_stored_as_null(database, sam):
    await MemberService(PlainPasswordEncoder()).signup(sam, ["", "", ""])

    row = await fetch_row("a@b.com")
    assert row.member_address is None


@pytest.mark.asyncio
async def test_login_matches_stored_record(database, sam):
    service = MemberService(PlainPasswordEncoder())
    await service.signup(sam)

    result = await service.login(Member(email="a@b.com", password="pw1"))

    assert isinstance(result, Matched)
    assert result.member.email == "a@b.com"
    assert result.member.nickname == "Sam"
    assert result.member.address == sam.address
    assert not hasattr(result.member, "password")


@pytest.mark.asyncio
@pytest.mark.parametrize("email,password", [
    ("a@b.com", "wrong"),
    ("a@b.com", "PW1"),
    ("nobody@b.com", "pw1"),
    ("", ""),
])
async def test_login_not_found(database, sam, email, password):
    service = MemberService(PlainPasswordEncoder())
    await service.signup(sam)

    assert await service.login(Member(email=email, password=password)) == NotFound()


@pytest.mark.asyncio
async def test_withdrawn_member_cannot_login(database, sam):
    service = MemberService(PlainPasswordEncoder())
    await service.signup(sam)
    async with get_mysql_session() as session:
        await session.execute(
            update(MemberRow).where(MemberRow.member_email == "a@b.com").values(member_del_fl="Y")
        )

    assert await service.login(Member(email="a@b.com", password="pw1")) == NotFound()


@pytest.mark.asyncio
async def test_bcrypt_encoder_round(database, sam):
    service = MemberService(BcryptPasswordEncoder(rounds=4))
    await service.signup(sam)

    row = await fetch_row("a@b.com")
    assert row.member_pw != "pw1"
    assert row.member_pw.startswith("$2")
    assert isinstance(await service.login(Member(email="a@b.com", password="pw1")), Matched)
    assert await service.login(Member(email="a@b.com", password="pw2")) == NotFound()


def test_bcrypt_rejects_non_hash_value():
    assert BcryptPasswordEncoder(rounds=4).matches("pw1", "pw1") is False


def test_get_password_encoder():
    assert isinstance(get_password_encoder("plain"), PlainPasswordEncoder)
    assert isinstance(get_password_encoder("bcrypt"), BcryptPasswordEncoder)
    with pytest.raises(ValueError):
        get_password_encoder("md5")


def test_join_address():
    assert join_address(["1", "2", "3"]) == "1^^^2^^^3"
    assert join_address(["", " ", ""]) is None
    assert join_address(None) is None
