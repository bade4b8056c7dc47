from models.account import Account
from models.journal import Journal
from models.journal_detail import JournalDetail
from models.users import User
from models.category import Category
from models.product import Product
from models.comment import Comment
from models.transaction import Transaction, TransactionStatus, TransactionType

__all__ = ['Account', 'Category', 'Comment', 'Journal', 'JournalDetail', 'Product', 'Transaction', 'TransactionStatus', 'TransactionType', 'User',]
