"""
codegen-init - elm-codegen starter 파일 생성 CLI

생성 파일:
    codegen/Generate.elm          starter (HelloWorld.elm 생성 예시)
    codegen/helpers/Helper.elm    helper 예시 (Gen.Helper.add5)

사용법:
    # 현재 디렉터리에 생성
    codegen-init

    # 계획만 확인 (dry-run)
    codegen-init path/to/project --dry-run

    # 기존 파일 덮어쓰기
    codegen-init --force

    # 템플릿 목록 / 원문 출력
    codegen-init --list
    codegen-init --print starter > codegen/Generate.elm
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from codegen_init.core.config import ScaffoldConfig, load_config
from codegen_init.domain.errors import ScaffoldError
from codegen_init.templates.registry import get_template, list_templates, target_path
from codegen_init.templates.scaffolder import ScaffoldResult, scaffold_project

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool = False) -> None:
    """CLI 로깅 설정 (stderr)."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="codegen-init",
        description="elm-codegen starter 파일 생성",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "project_dir",
        nargs="?",
        default=".",
        help="프로젝트 루트 (기본: 현재 디렉터리)",
    )
    parser.add_argument(
        "--force",
        action="store_true",
        help="기존 파일 덮어쓰기 (기본: 건너뜀)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="디스크에 쓰지 않고 계획만 출력",
    )
    parser.add_argument(
        "--config",
        type=str,
        help="설정 파일 경로 (기본: PROJECT_DIR 또는 현재 디렉터리의 codegen-init.yaml)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="결과를 JSON으로 stdout에 출력",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="DEBUG 로그 출력",
    )

    actions = parser.add_mutually_exclusive_group()
    actions.add_argument(
        "--list",
        action="store_true",
        help="등록된 템플릿 목록 출력",
    )
    actions.add_argument(
        "--print",
        dest="print_name",
        metavar="NAME",
        help="템플릿 원문을 stdout에 그대로 출력 (예: starter)",
    )
    return parser


def _print_templates(config: ScaffoldConfig) -> None:
    codegen_dir = Path(config.codegen_dir)
    for spec in list_templates():
        path = target_path(spec, codegen_dir, config.helpers_dir)
        print(f"{spec.name:<10} {path.as_posix():<30} {spec.description}")


def _report(result: ScaffoldResult) -> None:
    prefix = "[DRY-RUN] " if result.dry_run else ""
    logger.info(f"{prefix}codegen 디렉터리: {result.codegen_dir}")
    logger.info(f"{prefix}생성: {len(result.created)}개, 건너뜀: {len(result.skipped)}개")
    for warning in result.warnings:
        logger.warning(f"  - {warning}")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.verbose)

    try:
        if args.print_name:
            sys.stdout.write(get_template(args.print_name).content)
            return 0

        config_path = Path(args.config) if args.config else None
        config = load_config(config_path, project_root=Path(args.project_dir))
        logger.debug(f"설정: {config}")

        if args.list:
            _print_templates(config)
            return 0

        result = scaffold_project(
            Path(args.project_dir),
            config,
            overwrite=args.force,
            dry_run=args.dry_run,
        )
    except ScaffoldError as e:
        logger.error(str(e))
        if args.json:
            print(json.dumps({"error": e.to_dict()}, indent=2, ensure_ascii=False))
        return 1

    if args.json:
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    else:
        _report(result)

    return 0


if __name__ == "__main__":
    sys.exit(main())
