#!/usr/bin/env python3
"""
生成 ADMIN_PASSWORD_HASH 配置值

用法: python scripts/hash_admin_password.py <password>
"""

import sys
from pathlib import Path

# 添加项目根目录到Python路径
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from app.core.security import get_password_hash


def main(argv):
    if len(argv) != 2:
        print(__doc__.strip())
        return 1
    print(f"ADMIN_PASSWORD_HASH={get_password_hash(argv[1])}")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
