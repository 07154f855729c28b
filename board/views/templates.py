"""
HTML 뷰 렌더링
뷰 이름("common/main", "member/login", "member/signup")과 모델로 HTML 응답 생성
"""

import json
from html import escape
from typing import Any, Callable, Dict, Optional

from fastapi.responses import HTMLResponse

_STYLE = """
    body { font-family: 'Segoe UI', 'Malgun Gothic', sans-serif; margin: 0; background: #f5f6fa; }
    header { background: #4b4bcc; color: white; padding: 16px 32px; }
    header a { color: white; text-decoration: none; }
    main { max-width: 480px; margin: 40px auto; background: white; padding: 32px; border-radius: 12px; }
    label { display: block; margin-top: 12px; }
    input[type=text], input[type=password], input[type=email] { width: 100%; padding: 8px; box-sizing: border-box; }
    button { margin-top: 16px; padding: 10px 20px; }
"""

def _layout(title: str, body: str, message: Optional[str] = None) -> str:
    alert = ""
    if message:
        # 플래시 메시지는 한 번만 alert로 표시
        payload = json.dumps(message, ensure_ascii=False).replace("<", "\\u003c")
        alert = f"<script>alert({payload});</script>"

    return f"""<!DOCTYPE html>
<html lang="ko">
<head>
    <meta charset="UTF-8">
    <title>{escape(title)}</title>
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <style>{_STYLE}</style>
</head>
<body>
    <header><a href="/">게시판 프로젝트</a></header>
    <main>{body}</main>
    {alert}
</body>
</html>"""

def _login_form(model: Dict[str, Any]) -> str:
    save_id = model.get("save_id") or ""
    checked = " checked" if save_id else ""
    return f"""
        <form action="/member/login" method="POST" id="loginForm">
            <label>이메일 <input type="text" name="memberEmail" value="{escape(save_id)}" autocomplete="off"></label>
            <label>비밀번호 <input type="password" name="memberPw"></label>
            <label><input type="checkbox" name="saveId"{checked}> 아이디 저장</label>
            <button>로그인</button>
        </form>
        <p><a href="/member/signup">회원가입</a></p>"""

def render_main(model: Dict[str, Any]) -> str:
    login_member = model.get("login_member")
    if login_member:
        body = f"""
        <h2>{escape(login_member.nickname)}님 환영합니다</h2>
        <p>{escape(login_member.email)}</p>
        <p><a href="/member/logout">로그아웃</a></p>"""
    else:
        body = "<h2>로그인</h2>" + _login_form(model)
    return _layout("메인 페이지", body, model.get("message"))

def render_login(model: Dict[str, Any]) -> str:
    return _layout("로그인", "<h2>로그인</h2>" + _login_form(model), model.get("message"))

def render_signup(model: Dict[str, Any]) -> str:
    body = """
        <h2>회원 가입</h2>
        <form action="/member/signup" method="POST" id="signupForm">
            <label>이메일 <input type="email" name="memberEmail" required></label>
            <label>비밀번호 <input type="password" name="memberPw" required></label>
            <label>닉네임 <input type="text" name="memberNickname" required></label>
            <label>전화번호 <input type="text" name="memberTel" required></label>
            <label>주소
                <input type="text" name="memberAddress" placeholder="우편번호">
                <input type="text" name="memberAddress" placeholder="도로명/지번 주소">
                <input type="text" name="memberAddress" placeholder="상세 주소">
            </label>
            <button>가입하기</button>
        </form>"""
    return _layout("회원 가입", body, model.get("message"))

VIEWS: Dict[str, Callable[[Dict[str, Any]], str]] = {
    "common/main": render_main,
    "member/login": render_login,
    "member/signup": render_signup,
}

def render_view(name: str, model: Optional[Dict[str, Any]] = None) -> HTMLResponse:
    """이름으로 뷰를 찾아 렌더링"""
    renderer = VIEWS.get(name)
    if renderer is None:
        raise KeyError(f"Unknown view: {name}")
    return HTMLResponse(renderer(model or {}))
