# Generated for the initial Media model

from django.db import migrations, models

import media.models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Media',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('guid', models.CharField(default=media.models.generate_nanoid, editable=False, max_length=21, unique=True)),
                ('name', models.CharField(blank=True, max_length=255)),
                ('description', models.TextField(blank=True, null=True)),
                ('context', models.CharField(db_index=True, max_length=64)),
                ('content_type', models.CharField(blank=True, max_length=100)),
                ('provider_name', models.CharField(blank=True, max_length=255)),
                ('provider_reference', models.CharField(blank=True, max_length=255)),
                (
                    'provider_status',
                    models.CharField(
                        choices=[('OK', 'OK'), ('ERROR', 'Error'), ('PENDING', 'Pending')],
                        db_index=True,
                        default='PENDING',
                        max_length=10,
                    ),
                ),
                ('size', models.BigIntegerField(default=0)),
                ('width', models.PositiveIntegerField(default=0)),
                ('height', models.PositiveIntegerField(default=0)),
                ('cdn_is_flushable', models.BooleanField(default=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name_plural': 'media',
                'ordering': ['-created_at'],
            },
        ),
    ]
