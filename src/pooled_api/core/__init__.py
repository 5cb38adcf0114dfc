"""
목적: 도메인 코어 패키지를 제공한다.
설명: HTTP/드라이버와 무관한 도메인 레코드와 쿼리 실행 로직을 묶는다.
디자인 패턴: 패키지
참조: src/pooled_api/core/users
"""
