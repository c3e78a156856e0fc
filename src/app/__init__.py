"""
App layer: HTTP 서버 (FastAPI + Jinja2).

역할:
- 입력 폼, 카드 생성, 미리보기, 아티팩트 다운로드
- 설정 로드, 저장소/렌더러 주입 (app.state)
- ⚠️ 렌더링 로직 없음 (src/render에 위임)

주의: 폴더 구분
- src/app/templates/ → Jinja2 HTML 페이지
- src/render/templates/ → 카드 SVG 템플릿
"""
