import pandas as pd

from frametour.catalog import LessonCatalog
from frametour.commands.tour import main
from frametour.lessons import BasicsLesson, Lesson, step

catalog = LessonCatalog()
catalog.register(BasicsLesson)


@catalog.register
class WindowLesson(Lesson):
    name = "windows"
    title = "Expanding Windows"
    summary = "Cumulative statistics over the sales."

    @step("Expanding mean", pd.Series.expanding)
    def expanding(self):
        """Each value is the mean of all the previous ones."""
        sales = self.data.sales().set_index("date")
        return sales["total"].expanding().mean().round(2).head(10)


raise SystemExit(main(["run", "--all"], catalog=catalog))
