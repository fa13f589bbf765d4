from .types import Allocation


class AllocationModel:
    def predict(self, age: float, risk_score: float) -> Allocation:
        raise NotImplementedError
