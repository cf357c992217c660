# Menu states
MAIN_MENU, VIEWING_PRODUCTS, VIEWING_CART, VIEWING_ORDERS, EXITED = range(5)

# Main menu choices mapped to the state they lead to
MENU_OPTIONS = {
    1: ('View Products', VIEWING_PRODUCTS),
    2: ('View Shopping Cart', VIEWING_CART),
    3: ('View Orders', VIEWING_ORDERS),
    4: ('Exit', EXITED)
}

# Capacity defaults
MAX_PRODUCTS = 100
MAX_CART_ITEMS = 100
MAX_ORDERS = 100

# Console messages
MESSAGES = {
    'MENU_TITLE': 'E-Commerce System Menu:',
    'INVALID_INPUT': 'Invalid input! Please try again.',
    'INVALID_PRODUCT': 'Invalid Product ID. Please enter a valid ID from the list.',
    'PRODUCT_ADDED': 'Product added successfully!',
    'CART_FULL': 'Shopping cart is full!',
    'CART_EMPTY': 'Your Shopping Cart is empty.',
    'CHECKOUT_DONE': 'You have successfully checked out the products!',
    'ORDERS_FULL': 'Warning: Maximum number of orders reached.',
    'NO_ORDERS': 'No orders have been placed yet.',
    'GOODBYE': 'Exiting the E-Commerce System. Thank you!'
}

# Prompts
PROMPTS = {
    'MENU_CHOICE': 'Enter your choice: ',
    'PRODUCT_ID': 'Enter Product ID to add to cart (0 to go back): ',
    'QUANTITY': 'Enter quantity: ',
    'ADD_ANOTHER': 'Add another product? (Y/N): ',
    'CHECKOUT': 'Do you want to check out? (Y/N): ',
    'PAYMENT_CHOICE': 'Enter choice: '
}
