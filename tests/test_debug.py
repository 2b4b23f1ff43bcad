"""调试输出测试"""

from rich.console import Console

from pagebridge import create_page_config, use_page_event
from pagebridge.debug import history_table, print_page, registry_table


def test_registry_table_rows(alipay_runtime, host_page):
    def Foo(props):
        use_page_event("onShow", lambda: None)
        use_page_event("onBack", lambda: None)
        return None

    config = create_page_config(Foo, "pages/debug/index", runtime=alipay_runtime)
    host_page(config).load()

    table = registry_table(config["page"].registry)

    assert table.row_count == 2
    assert "page:pages/debug/index:0" in str(table.title)


def test_print_page(alipay_runtime, host_page):
    config = create_page_config(lambda props: None, "pages/debug/index", runtime=alipay_runtime)
    page = host_page(config)
    page.load()
    page.hide()

    console = Console(record=True, width=120)
    print_page(config["page"], console=console)
    output = console.export_text()

    assert history_table(config["page"]).row_count == 3
    assert "onHide" in output
    assert "hidden" in output
