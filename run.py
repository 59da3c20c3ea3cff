"""이 파일은 .py 엔트리포인트로 명령행 파서 실행을 제공합니다."""

from debcontrol.cli import main


if __name__ == "__main__":
    raise SystemExit(main())
