"""Shared constants for the calendar."""

VIEW_WEEK = 'week'
VIEW_MONTH = 'month'
VIEWS = (VIEW_WEEK, VIEW_MONTH)

NOTIFICATION_OPTIONS = [
    {'value': 1, 'label': '1분 전'},
    {'value': 10, 'label': '10분 전'},
    {'value': 60, 'label': '1시간 전'},
    {'value': 120, 'label': '2시간 전'},
    {'value': 1440, 'label': '1일 전'},
]

REPEAT_UNITS = {
    'daily': '일',
    'weekly': '주',
    'monthly': '월',
    'yearly': '년',
}

START_TIME_ERROR = '시작 시간은 종료 시간보다 빨라야 합니다.'
END_TIME_ERROR = '종료 시간은 시작 시간보다 늦어야 합니다.'
REQUIRED_FIELDS_ERROR = '필수 정보를 모두 입력해주세요.'
TIME_SETTINGS_ERROR = '시간 설정을 확인해주세요.'
