"""
JSON 报告器 - 输出 JSON 格式报告
"""

import json
import os
import sys
from typing import Sequence, TextIO

from content_checker.core.models import ValidationResult
from content_checker.reporters.summary import Summary


class JsonReporter:
    """JSON 报告器"""

    def __init__(self, output: TextIO | None = None):
        self.output = output or sys.stdout

    def report(self, results: Sequence[ValidationResult], summary: Summary) -> None:
        """生成 JSON 格式报告"""
        report_data = {
            "files": [
                {
                    "path": os.path.relpath(result.path),
                    "clean": result.is_clean,
                    "findings": [
                        {
                            "severity": finding.severity.value,
                            "code": finding.code,
                            "message": finding.message,
                            "line": finding.line,
                        }
                        for finding in result.findings
                    ],
                }
                for result in results
            ],
            "summary": summary.to_dict(),
        }

        json_str = json.dumps(report_data, indent=2, ensure_ascii=False)
        print(json_str, file=self.output)
