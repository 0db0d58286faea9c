# custom exception 정의 및 관리


class MetroRouteException(Exception):  # 예외 구조 정의
    def __init__(self, message: str, code: str = "INTERNAL_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)


class InvalidSelectionException(MetroRouteException):
    # 출발/도착역 미선택, 출발역 == 도착역, 지원하지 않는 경로 기준
    def __init__(self, message: str = "출발역과 도착역을 올바르게 선택해주세요"):
        super().__init__(message, code="INVALID_SELECTION")


class StationNotFoundException(MetroRouteException):
    def __init__(self, message: str = "역을 찾을 수 없습니다"):
        super().__init__(message, code="STATION_NOT_FOUND")


class DataIntegrityException(MetroRouteException):
    # 노선 데이터 자체의 결함 => 요청 단위 오류가 아님
    def __init__(self, message: str = "노선 데이터가 올바르지 않습니다"):
        super().__init__(message, code="DATA_INTEGRITY_ERROR")


class RouteNotFoundException(MetroRouteException):
    def __init__(self, message: str = "경로를 찾을 수 없습니다"):
        super().__init__(message, code="ROUTE_NOT_FOUND")
