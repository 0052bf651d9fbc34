"""
cli - mackerel-agent 플러그인 CLI

- app: Click 명령어 (수집 사이클 1회 실행)
- output: 메트릭 / 그래프 정의 출력 포맷
- ui: stderr Rich 콘솔과 로깅 설정
"""
