"""태그 클라우드 생성 패키지.

텍스트 파일을 구분자 집합으로 토큰화하여 단어 빈도를 집계하고,
빈도 상위 N개 단어를 폰트 크기가 빈도에 비례하는 HTML 태그 클라우드로 렌더링한다.
"""
