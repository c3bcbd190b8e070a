#!/usr/bin/env python3
"""統一的檢查腳本，依序執行格式化檢查、靜態分析與單元測試。

用法：
    python run_all_linters.py            # 執行全部檢查
    python run_all_linters.py --no-tests # 略過 pytest

所有輸出會集中顯示，最後列出總結；任何一項失敗時以非零狀態碼結束。
"""

from pathlib import Path
import subprocess
import sys

ROOT = Path(__file__).parent
PACKAGES = ["app", "core", "infrastructure", "main.py"]

CHECKS: list[tuple[list[str], str]] = [
    (["python", "-m", "black", ".", "--check"], "Black 格式化檢查"),
    (["python", "-m", "isort", ".", "--check-only"], "isort 匯入排序檢查"),
    (["python", "-m", "ruff", "check", "."], "Ruff 靜態檢查"),
    (["python", "-m", "pylint", *PACKAGES], "Pylint 靜態分析"),
]
TESTS: tuple[list[str], str] = (["python", "-m", "pytest", "-q"], "pytest 單元測試")


def run_check(cmd: list[str], description: str) -> tuple[bool, str]:
    """執行單一檢查，回傳 (是否成功, 輸出)。"""
    print(f"\n{'=' * 60}\n{description}: {' '.join(cmd)}\n{'=' * 60}")
    try:
        result = subprocess.run(cmd, capture_output=True, text=True, check=False, cwd=ROOT)
    except OSError as e:
        print(f"❌ 無法執行: {e}")
        return False, str(e)

    output = (result.stdout + result.stderr).strip()
    print("✅ 成功" if result.returncode == 0 else "❌ 失敗")
    if output:
        print(output)
    return result.returncode == 0, output


def main(argv: list[str]) -> int:
    """依序執行所有檢查並輸出總結。"""
    checks = list(CHECKS)
    if "--no-tests" not in argv:
        checks.append(TESTS)

    results = [(description, run_check(cmd, description)[0]) for cmd, description in checks]

    print(f"\n{'=' * 60}\n總結報告\n{'=' * 60}")
    for description, success in results:
        print(f"{description}: {'✅ 通過' if success else '❌ 失敗'}")

    all_passed = all(success for _, success in results)
    print(f"\n整體結果: {'✅ 全部通過' if all_passed else '❌ 有錯誤'}")
    return 0 if all_passed else 1


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
