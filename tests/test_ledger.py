import logging
from shop.database.ledger import OrderLedger
from shop.models.models import CartItem, Order

def make_order(method='Cash', *quantities):
    items = [CartItem(product_id=2, name='Mouse', price=25, quantity=q) for q in quantities or (1,)]
    return Order.from_cart(items, method)

def read_log(log_path):
    return log_path.read_text(encoding='utf-8').splitlines()

def test_ids_start_at_one_and_increase_by_one(ledger):
    saved = [ledger.save(make_order()) for _ in range(3)]
    assert [order.order_id for order in saved] == [1, 2, 3]

def test_configured_start_id(log_path):
    ledger = OrderLedger(str(log_path), start_order_id=50)
    assert ledger.save(make_order()).order_id == 50
    assert ledger.save(make_order()).order_id == 51

def test_next_order_id_returns_then_increments(ledger):
    assert ledger.next_order_id() == 1
    assert ledger.next_order_id() == 2

def test_save_appends_one_log_line(ledger, log_path):
    ledger.save(make_order('Credit / Debit Card'))
    ledger.save(make_order('GCash'))

    assert read_log(log_path) == [
        '[LOG] -> Order ID: 1 has been successfully checked out and paid using Credit / Debit Card.',
        '[LOG] -> Order ID: 2 has been successfully checked out and paid using GCash.'
    ]

def test_log_is_appended_across_ledgers(log_path):
    log_path.write_text('earlier line\n', encoding='utf-8')
    OrderLedger(str(log_path)).save(make_order())

    lines = read_log(log_path)
    assert lines[0] == 'earlier line'
    assert len(lines) == 2

def test_total_is_fixed_at_creation():
    order = make_order('Cash', 1, 2, 3)
    assert order.total_amount == 150
    assert order.item_count == 3

def test_full_ledger_rejects_without_consuming_id(log_path, caplog):
    ledger = OrderLedger(str(log_path), max_orders=2)
    ledger.save(make_order())
    ledger.save(make_order())

    with caplog.at_level(logging.WARNING):
        assert ledger.save(make_order()) is None
        assert ledger.save(make_order()) is None

    assert len(ledger) == 2
    assert len(read_log(log_path)) == 2
    assert ledger.next_order_id() == 3
    assert 'full' in caplog.text

def test_log_failure_keeps_order_in_memory(tmp_path, caplog):
    # A directory cannot be opened for append
    ledger = OrderLedger(str(tmp_path))

    with caplog.at_level(logging.ERROR):
        order = ledger.save(make_order())

    assert order.order_id == 1
    assert ledger.orders == [order]
    assert 'Could not write order 1' in caplog.text

def test_list_all_empty(ledger):
    assert ledger.list_all() == 'No orders have been placed yet.'

def test_list_all_renders_orders_in_insertion_order(ledger):
    ledger.save(make_order('Cash', 2))
    ledger.save(make_order('GCash', 1))

    text = ledger.list_all()
    assert 'No orders' not in text
    assert text.index('Order ID: 1') < text.index('Order ID: 2')
    assert 'Total Amount: 50' in text
    assert 'Payment Method: GCash' in text
    assert 'Order Details:' in text
    assert 'Mouse' in text
