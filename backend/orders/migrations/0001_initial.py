import uuid

import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Order',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('customer_name', models.CharField(max_length=200)),
                ('description', models.TextField(help_text='What the customer ordered.')),
                ('deadline', models.DateTimeField(help_text='When the order must be ready.')),
                ('status', models.CharField(
                    choices=[
                        ('PENDING', 'Pendente'),
                        ('IN_PROGRESS', 'Em Produção'),
                        ('COMPLETED', 'Concluído'),
                        ('DELIVERED', 'Entregue'),
                    ],
                    db_index=True,
                    default='PENDING',
                    max_length=20,
                )),
                ('estimated_value', models.DecimalField(decimal_places=2, default=0, max_digits=12)),
                ('owner', models.ForeignKey(
                    help_text='Account that owns this record.',
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='+',
                    to=settings.AUTH_USER_MODEL,
                )),
            ],
            options={
                'verbose_name': 'Order',
                'verbose_name_plural': 'Orders',
                'ordering': ['deadline'],
                'indexes': [models.Index(fields=['owner', 'deadline'], name='order_owner_deadline_idx')],
            },
        ),
    ]
