"""
Unit tests for the member controller (service replaced by a fake)
"""
import pytest

from board.member.controller import (
    MemberController, CookieSpec, save_id_cookie,
    LOGIN_FAIL_MESSAGE, SIGNUP_FAIL_MESSAGE,
)
from board.member.dto import Member, LoginMember
from board.member.service import Matched, NotFound, Inserted, Rejected
from board.session.session_manager import SessionContext


class FakeMemberService:
    def __init__(self, members=None, signup_result=None):
        self.members = members or {}
        self.signup_result = signup_result or Inserted(1)
        self.signup_calls = []

    async def login(self, input_member):
        stored = self.members.get(input_member.email)
        if stored is None or stored[0] != input_member.password:
            return NotFound()
        return Matched(stored[1])

    async def signup(self, input_member, member_address=None):
        self.signup_calls.append((input_member, member_address))
        return self.signup_result


def login_member(email="a@b.com", nickname="Sam", member_no=1):
    return LoginMember(member_no=member_no, email=email, nickname=nickname, telephone="01012345678")


@pytest.fixture
def session():
    return SessionContext("test-session")


@pytest.fixture
def controller():
    service = FakeMemberService(members={
        "a@b.com": ("pw1", login_member()),
        "c@d.com": ("pw2", login_member("c@d.com", "Kim", 2)),
    })
    return MemberController(service)


@pytest.mark.asyncio
async def test_login_success_without_save_id(controller, session):
    result = await controller.login(session, Member(email="a@b.com", password="pw1"))

    assert result.view == "redirect:/"
    assert result.flash is None
    assert session.login_member.email == "a@b.com"
    assert result.cookies == [CookieSpec("saveId", "a@b.com", "/", 0)]
    assert result.cookies[0].header() == "saveId=a@b.com; Path=/; Max-Age=0"


@pytest.mark.asyncio
@pytest.mark.parametrize("save_id", ["on", "", "yes"])
async def test_login_success_with_any_save_id_value(controller, session, save_id):
    result = await controller.login(session, Member(email="a@b.com", password="pw1"), save_id)

    assert result.cookies[0].max_age == 2592000
    assert result.cookies[0].value == "a@b.com"


@pytest.mark.asyncio
async def test_login_mismatch(controller, session):
    result = await controller.login(session, Member(email="a@b.com", password="wrong"), "on")

    assert result.view == "redirect:/"
    assert result.flash == LOGIN_FAIL_MESSAGE
    assert result.cookies == []
    assert session.login_member is None


@pytest.mark.asyncio
async def test_login_mismatch_keeps_existing_principal(controller, session):
    await controller.login(session, Member(email="a@b.com", password="pw1"))
    await controller.login(session, Member(email="c@d.com", password="bad"))

    assert session.login_member.email == "a@b.com"


@pytest.mark.asyncio
async def test_login_replaces_previous_principal(controller, session):
    await controller.login(session, Member(email="a@b.com", password="pw1"))
    await controller.login(session, Member(email="c@d.com", password="pw2"))

    assert session.login_member.nickname == "Kim"


@pytest.mark.asyncio
async def test_logout_is_idempotent(controller, store):
    session = store.create_session()
    await controller.login(session, Member(email="a@b.com", password="pw1"))

    first = controller.logout(session, store)
    second = controller.logout(session, store)

    assert first.view == "redirect:/"
    assert second.view == "redirect:/"
    assert session.login_member is None
    assert store.get_session(session.session_id) is None


@pytest.mark.asyncio
async def test_signup_success():
    service = FakeMemberService(signup_result=Inserted(1))
    controller = MemberController(service)
    address = ["04540", "서울", "2층"]

    result = await controller.signup(Member(email="a@b.com", password="pw1", nickname="Sam"), address)

    assert result.view == "redirect:/"
    assert result.flash == "Sam님의 가입을 환영 합니다😀"
    assert service.signup_calls[0][1] == address


@pytest.mark.asyncio
async def test_signup_rejected():
    controller = MemberController(FakeMemberService(signup_result=Rejected("duplicate")))

    result = await controller.signup(Member(email="a@b.com", nickname="Sam"), ["", "", ""])

    assert result.view == "redirect:signup"
    assert result.redirect_target == "signup"
    assert result.flash == SIGNUP_FAIL_MESSAGE
    assert "Sam" not in result.flash


def test_page_views(controller):
    assert controller.login_page().view == "member/login"
    assert controller.signup_page().view == "member/signup"
    assert not controller.login_page().is_redirect


def test_save_id_cookie_none_deletes():
    assert save_id_cookie("a@b.com", None).max_age == 0
