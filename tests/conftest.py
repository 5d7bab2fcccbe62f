import sys
import pytest
from pathlib import Path

# 确保项目根目录在 sys.path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture
def reference_loan():
    """参照贷款 (年利率, 年限)"""
    return (0.044, 25)


@pytest.fixture
def candidate_loans():
    return [(0.029, 10), (0.032, 12), (0.035, 15), (0.038, 20), (0.038, 22), (0.044, 25)]
