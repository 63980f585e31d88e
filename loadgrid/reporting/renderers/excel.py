from __future__ import annotations

from pathlib import Path

from openpyxl import Workbook
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side

from loadgrid.domain import ConflictLevel
from loadgrid.reporting.contexts import ConflictReportContext
from loadgrid.services.timeline.instants import days_between

LEVEL_FILLS = {
    ConflictLevel.LIGHT: "FFF3B0",
    ConflictLevel.MEDIUM: "FFD08A",
    ConflictLevel.SEVERE: "FF9E80",
}


class ConflictReportExcelRenderer:
    def render(self, ctx: ConflictReportContext, output_path: Path) -> Path:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        wb = Workbook()

        header_font = Font(bold=True)
        title_font = Font(bold=True, size=14)
        center = Alignment(horizontal="center")
        thin_border = Border(
            left=Side(style="thin"),
            right=Side(style="thin"),
            top=Side(style="thin"),
            bottom=Side(style="thin"),
        )
        header_fill = PatternFill("solid", fgColor="DDDDDD")

        def header_row(sheet, headers):
            for col_index, h in enumerate(headers, start=1):
                cell = sheet.cell(row=1, column=col_index, value=h)
                cell.font = header_font
                cell.alignment = center
                cell.fill = header_fill
                cell.border = thin_border

        # ---------------- Overview ----------------
        ws = wb.active
        ws.title = "Overview"
        ws["A1"] = f"Resource load - {ctx.resource_name}"
        ws["A1"].font = title_font

        row = 3

        def kv(key, value):
            nonlocal row
            ws[f"A{row}"] = key
            ws[f"B{row}"] = value
            ws[f"A{row}"].font = header_font
            ws[f"A{row}"].border = thin_border
            ws[f"B{row}"].border = thin_border
            row += 1

        kv("Resource ID", str(ctx.resource_id))
        kv("Resource name", ctx.resource_name)
        kv("As of", ctx.as_of.isoformat())
        kv("Work items", len(ctx.items))
        kv("Conflict zones", len(ctx.zones))
        kv("Peak load (%)", max((z.total_percent for z in ctx.zones), default=0))
        if ctx.layout is not None:
            kv("Display rows", ctx.layout.row_count)
            kv("Stack height (px)", ctx.layout.total_height)

        ws.column_dimensions["A"].width = 24
        ws.column_dimensions["B"].width = 36

        # ---------------- Conflicts ----------------
        ws_conf = wb.create_sheet("Conflicts")
        header_row(ws_conf, ["Start", "End", "Days", "Peak load (%)", "Level", "Tasks"])

        for r, zone in enumerate(ctx.zones, start=2):
            values = [
                zone.start_date.date().isoformat(),
                zone.end_date.date().isoformat(),
                days_between(zone.start_date, zone.end_date) + 1,
                zone.total_percent,
                zone.level.value,
                ", ".join(f"{t.name} ({t.capacity}%)" for t in zone.tasks),
            ]
            for c, v in enumerate(values, 1):
                cell = ws_conf.cell(r, c, v)
                cell.border = thin_border
            ws_conf.cell(r, 5).fill = PatternFill("solid", fgColor=LEVEL_FILLS[zone.level])

        for col_letter, width in (("A", 14), ("B", 14), ("C", 8), ("D", 16), ("E", 10), ("F", 60)):
            ws_conf.column_dimensions[col_letter].width = width

        # ---------------- Rows ----------------
        if ctx.layout is not None:
            ws_rows = wb.create_sheet("Rows")
            header_row(ws_rows, ["Item ID", "Name", "Start", "End", "Row"])
            names = {item.id: item for item in ctx.items}
            ordered = sorted(ctx.layout.row_of.items(), key=lambda pair: (pair[1], str(pair[0])))
            for r, (item_id, row_index) in enumerate(ordered, start=2):
                item = names.get(item_id)
                values = [
                    str(item_id),
                    item.name if item else "",
                    str(item.start_date or "") if item else "",
                    str(item.end_date or "") if item else "",
                    row_index,
                ]
                for c, v in enumerate(values, 1):
                    ws_rows.cell(r, c, v).border = thin_border

            ws_rows.column_dimensions["A"].width = 36
            ws_rows.column_dimensions["B"].width = 30
            for col_letter in ("C", "D", "E"):
                ws_rows.column_dimensions[col_letter].width = 16

        wb.save(output_path)
        return output_path
