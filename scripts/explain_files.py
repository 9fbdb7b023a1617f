from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.core.config import settings  # noqa: E402
from app.services.explain_service import get_active_explain_config  # noqa: E402
from app.explain import explain  # noqa: E402


def _read_text(path: str) -> str:
    text = Path(path).read_text(encoding="utf-8", errors="ignore")
    limit = settings.explain_max_input_chars
    if len(text) > limit:
        print(f"warning: {path} truncated to {limit} characters", file=sys.stderr)
        return text[:limit]
    return text


def main() -> None:
    parser = argparse.ArgumentParser(description="Explain how well a resume covers a job description.")
    parser.add_argument("--resume", required=True, help="Path to a plain-text resume")
    parser.add_argument("--jd", required=True, help="Path to a plain-text job description")
    parser.add_argument(
        "--out",
        default="",
        help="Optional output JSON path; prints to stdout when omitted.",
    )
    args = parser.parse_args()

    result = explain(_read_text(args.resume), _read_text(args.jd), get_active_explain_config())
    payload = json.dumps(result.to_wire(), ensure_ascii=False, indent=2)

    if args.out:
        out_path = Path(args.out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(payload + "\n", encoding="utf-8")
    else:
        print(payload)


if __name__ == "__main__":
    main()
