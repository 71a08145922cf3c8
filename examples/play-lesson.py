from frametour.config import TourConfig
from frametour.lessons import GroupingLesson
from frametour.render import render_result

config = TourConfig(rows=50, max_rows=5)
lesson = GroupingLesson(config)

for lesson_step in lesson.steps():
    print("---", lesson_step.title)
    print(lesson_step.source)
    print(render_result(lesson_step.result, max_rows=config.max_rows))
